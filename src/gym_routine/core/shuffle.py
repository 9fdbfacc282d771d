"""
Shuffle engine.

Permutes the muscle rotation order and rebuilds the routine with the same
days per week and week count.  This is the only source of randomness in
routine generation; the random source is injected so tests can seed it.
"""

import random
from datetime import datetime
from typing import Protocol, Sequence

from .assembler import assemble
from .catalog.base import Catalog
from .config import EXERCISES_PER_SLOT, WEEK_COUNT
from .errors import NoRoutineError
from .models import MuscleGroup, Profile, Routine


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b]; random.Random qualifies."""

    def randint(self, a: int, b: int) -> int: ...


def shuffle_muscles(muscles: Sequence[MuscleGroup], rng: RandomSource) -> list[MuscleGroup]:
    """
    Return a uniformly shuffled copy of ``muscles`` (Fisher–Yates).

    Walks from the last index down to 1, swapping each element with one at a
    uniformly chosen index j in [0, i].  The input is not modified.
    """
    shuffled = list(muscles)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def shuffle(
    muscles: Sequence[MuscleGroup],
    days_per_week: int | None,
    catalog: Catalog,
    rng: RandomSource,
    *,
    week_count: int = WEEK_COUNT,
    objective: str = "",
    gender: str = "",
    exercises_per_slot: int = EXERCISES_PER_SLOT,
    generated_at: datetime | None = None,
) -> Routine:
    """Shuffle the muscle order, then assemble a routine from it."""
    return assemble(
        shuffle_muscles(muscles, rng),
        days_per_week,
        week_count,
        catalog,
        objective=objective,
        gender=gender,
        exercises_per_slot=exercises_per_slot,
        generated_at=generated_at,
    )


def shuffle_profile_routine(
    profile: Profile,
    catalog: Catalog,
    rng: RandomSource | None = None,
    *,
    exercises_per_slot: int = EXERCISES_PER_SLOT,
    generated_at: datetime | None = None,
) -> Routine:
    """
    Build a reshuffled replacement for the profile's current routine.

    Uses the profile's selected muscles and the days per week / week count of
    the routine being replaced.  The profile itself is not modified.

    Raises:
        NoRoutineError: If the profile has no routine yet
        InsufficientDataError: If the profile no longer has any selected muscles
    """
    if profile.routine is None or not profile.routine.weeks:
        raise NoRoutineError("No routine to shuffle. Generate a routine first.")

    current = profile.routine
    return shuffle(
        profile.selected_muscles,
        current.days_per_week,
        catalog,
        rng if rng is not None else random.Random(),
        week_count=current.week_count,
        objective=profile.objective,
        gender=profile.gender,
        exercises_per_slot=exercises_per_slot,
        generated_at=generated_at,
    )
