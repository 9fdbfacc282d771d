"""
Routine assembler.

Turns an ordered muscle selection, a training-days count and a week count
into a Routine.  Muscles are assigned to slots by a rotation cursor that
keeps advancing across weeks; exercises within a slot are taken from the
muscle's catalog list at an offset of (slot + exercise index + week), so the
same muscle surfaces different exercises from week to week.

The assembler is a pure function of its inputs apart from ``generated_at``,
which defaults to the current UTC time.
"""

import warnings
from datetime import datetime, timezone
from typing import Sequence

from loguru import logger

from .catalog.base import Catalog, ExerciseDefinition
from .config import EXERCISES_PER_SLOT
from .errors import InsufficientDataError, UnknownMuscleWarning
from .models import DaySlot, MuscleGroup, Routine, Week


def select_exercises(
    exercises: Sequence[ExerciseDefinition],
    slot_index: int,
    week_number: int,
    limit: int = EXERCISES_PER_SLOT,
) -> tuple[ExerciseDefinition, ...]:
    """
    Pick up to ``limit`` exercises from a muscle's ordered list.

    Index of pick e is (slot_index + e + week_number) mod len(exercises).

    Args:
        exercises: Ordered catalog list for one muscle group
        slot_index: 0-based slot within the week
        week_number: 1-based week number
        limit: Maximum number of exercises per slot

    Returns:
        min(limit, len(exercises)) exercises, no repeats
    """
    n = len(exercises)
    return tuple(exercises[(slot_index + e + week_number) % n] for e in range(min(limit, n)))


def slot_notes(muscle: MuscleGroup, objective: str = "", gender: str = "") -> str:
    """Free-text annotation attached to each day slot."""
    return f"Focus on {muscle}. Objective: {objective or 'N/A'}. Gender: {gender or 'N/A'}"


def _build_week(
    week_number: int,
    cursor: int,
    muscles: Sequence[MuscleGroup],
    days_per_week: int,
    catalog: Catalog,
    exercises_per_slot: int,
    objective: str,
    gender: str,
) -> tuple[Week, int]:
    """Build one week starting at rotation ``cursor``; return it with the advanced cursor."""
    days: list[DaySlot] = []
    for slot_index in range(days_per_week):
        muscle = muscles[(cursor + slot_index) % len(muscles)]
        exercises = select_exercises(
            catalog.exercises_for(muscle), slot_index, week_number, exercises_per_slot
        )
        days.append(
            DaySlot(
                slot_number=slot_index + 1,
                muscle=muscle,
                exercises=exercises,
                notes=slot_notes(muscle, objective, gender),
            )
        )
    return Week(week_number=week_number, days=tuple(days)), cursor + days_per_week


def assemble(
    muscles: Sequence[MuscleGroup],
    days_per_week: int | None,
    week_count: int,
    catalog: Catalog,
    *,
    objective: str = "",
    gender: str = "",
    exercises_per_slot: int = EXERCISES_PER_SLOT,
    generated_at: datetime | None = None,
) -> Routine:
    """
    Assemble a multi-week routine.

    Args:
        muscles: Ordered muscle selection (rotation order)
        days_per_week: Training slots per week
        week_count: Number of weeks to generate
        catalog: Exercise catalog to draw from
        objective: Training objective, copied into slot notes
        gender: User gender, copied into slot notes
        exercises_per_slot: Upper bound on exercises per slot
        generated_at: Timestamp for the routine (default: now, UTC)

    Returns:
        Routine with ``week_count`` weeks of ``days_per_week`` slots each

    Raises:
        InsufficientDataError: If days_per_week is unset/zero or muscles is empty
        ValueError: If week_count is less than 1
    """
    if not days_per_week or not muscles:
        raise InsufficientDataError(
            "Days per week and at least one muscle group are required to build a routine."
        )
    if week_count < 1:
        raise ValueError(f"week_count must be at least 1, got {week_count}")

    unknown = catalog.unknown(dict.fromkeys(muscles))
    if unknown:
        logger.warning("Muscle groups missing from catalog", muscles=unknown)
        warnings.warn(
            f"No catalog exercises for: {', '.join(unknown)}; their slots will be empty.",
            UnknownMuscleWarning,
            stacklevel=2,
        )

    weeks: list[Week] = []
    cursor = 0
    for week_number in range(1, week_count + 1):
        week, cursor = _build_week(
            week_number,
            cursor,
            muscles,
            days_per_week,
            catalog,
            exercises_per_slot,
            objective,
            gender,
        )
        weeks.append(week)

    stamp = generated_at if generated_at is not None else datetime.now(timezone.utc)
    return Routine(generated_at=stamp.isoformat(), weeks=tuple(weeks))
