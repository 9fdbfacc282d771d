"""
Base types for the exercise catalog.

ExerciseDefinition is one catalog entry. Catalog maps each muscle group to
its ordered, non-empty tuple of definitions; position within a group is
significant because the assembler selects exercises by index.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


@dataclass(frozen=True)
class ExerciseDefinition:
    """A single exercise within one muscle group."""

    name: str
    description: str
    media_ref: str        # GIF/image URL or bundled media path
    muscle_group: str = ""


@dataclass(frozen=True)
class Catalog:
    """
    Immutable muscle group → exercises table.

    Lookups for unknown groups return an empty tuple rather than raising;
    callers that need strictness check ``in`` or ``unknown()`` first.
    """

    groups: Mapping[str, tuple[ExerciseDefinition, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen: dict[str, tuple[ExerciseDefinition, ...]] = {}
        for muscle, exercises in self.groups.items():
            exercises = tuple(exercises)
            if not exercises:
                raise ValueError(f"Catalog group {muscle!r} has no exercises")
            frozen[muscle] = exercises
        object.__setattr__(self, "groups", MappingProxyType(frozen))

    def __contains__(self, muscle: object) -> bool:
        return muscle in self.groups

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def exercises_for(self, muscle: str) -> tuple[ExerciseDefinition, ...]:
        """Return the ordered exercises for a muscle group, or () if unknown."""
        return self.groups.get(muscle, ())

    def muscle_groups(self) -> list[str]:
        """Muscle group names in catalog order."""
        return list(self.groups)

    def unknown(self, muscles: Iterable[str]) -> list[str]:
        """Return the muscles that have no catalog entry, in input order."""
        return [m for m in muscles if m not in self.groups]
