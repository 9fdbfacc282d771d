"""
Data models for gym-routine.

Profile is the mutable per-user record; Routine, Week and DaySlot are frozen
values produced by the assembler and replaced wholesale, never edited.
"""

from dataclasses import dataclass, field
from typing import Iterator

from .catalog.base import ExerciseDefinition

MuscleGroup = str


@dataclass(frozen=True)
class DaySlot:
    """One training day within a week, bound to a single muscle group."""

    slot_number: int  # 1-based, up to days_per_week
    muscle: MuscleGroup
    exercises: tuple[ExerciseDefinition, ...] = ()
    notes: str = ""


@dataclass(frozen=True)
class Week:
    """One week of a routine."""

    week_number: int  # 1-based
    days: tuple[DaySlot, ...] = ()


@dataclass(frozen=True)
class Routine:
    """
    A generated multi-week schedule.

    ``generated_at`` is an ISO-8601 timestamp; everything else is a pure
    function of the assembler's inputs.
    """

    generated_at: str
    weeks: tuple[Week, ...] = ()

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    @property
    def days_per_week(self) -> int:
        """Training days per week this routine was built with (0 if empty)."""
        return len(self.weeks[0].days) if self.weeks else 0

    def slots(self) -> Iterator[tuple[int, DaySlot]]:
        """Yield (week_number, slot) pairs in schedule order."""
        for week in self.weeks:
            for slot in week.days:
                yield week.week_number, slot

    def muscle_sequence(self) -> list[MuscleGroup]:
        """Muscle of every slot in schedule order."""
        return [slot.muscle for _, slot in self.slots()]


@dataclass
class Profile:
    """
    User profile: body attributes, training preferences and last routine.

    Every attribute is optional until the user sets it.  ``selected_muscles``
    keeps insertion order (it drives rotation) and drops duplicates.
    Out-of-range values raise ValidationError on construction; partial
    updates go through ``validation.apply_profile_update``.
    """

    gender: str = ""
    age: int | None = None
    height_cm: int | None = None
    weight_kg: float | None = None
    objective: str = ""
    days_per_week: int | None = None
    selected_muscles: list[MuscleGroup] = field(default_factory=list)
    routine: Routine | None = None

    def __post_init__(self) -> None:
        """Validate and normalise profile data."""
        from .validation import normalize_field

        for name in ("gender", "age", "height_cm", "weight_kg", "objective", "days_per_week"):
            value = getattr(self, name)
            if value not in (None, ""):
                setattr(self, name, normalize_field(name, value))
        self.selected_muscles = normalize_field("selected_muscles", list(self.selected_muscles))

    @property
    def has_routine(self) -> bool:
        return self.routine is not None

    def is_ready_for_routine(self) -> bool:
        """True when days per week and at least one muscle are set."""
        return bool(self.days_per_week) and bool(self.selected_muscles)
