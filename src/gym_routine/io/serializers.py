"""
JSON serialization for profile and routine models.

Handles conversion between dataclasses and JSON-compatible dicts.  Stored
keys follow the layout of the user document:

    {"user_id", "created_at", "profile": {..., "routine": {"generated_at", "weeks"}}}
"""

import json
from typing import Any

from ..core.catalog.base import ExerciseDefinition
from ..core.errors import ValidationError
from ..core.models import DaySlot, Profile, Routine, Week


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise ValidationError(where, f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValidationError(where, f"missing key '{key}'")
    return data[key]


def _require_int(data: Any, key: str, where: str) -> int:
    value = _require(data, key, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(where, f"'{key}' must be an integer, got {value!r}")
    return value


def _list_of(data: Any, key: str, where: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValidationError(where, f"'{key}' must be a list, got {type(value).__name__}")
    return value


def exercise_to_dict(exercise: ExerciseDefinition) -> dict[str, Any]:
    """Convert ExerciseDefinition to a JSON-compatible dict (muscle is implied by the slot)."""
    return {
        "name": exercise.name,
        "description": exercise.description,
        "media_ref": exercise.media_ref,
    }


def dict_to_exercise(data: dict[str, Any], muscle_group: str) -> ExerciseDefinition:
    """
    Convert dict to ExerciseDefinition.

    Raises:
        ValidationError: If name is missing
    """
    return ExerciseDefinition(
        name=str(_require(data, "name", "exercise")),
        description=str(data.get("description", "")),
        media_ref=str(data.get("media_ref", "")),
        muscle_group=muscle_group,
    )


def routine_to_dict(routine: Routine) -> dict[str, Any]:
    """
    Convert Routine to JSON-compatible dict.

    Args:
        routine: Routine to convert

    Returns:
        Dict representation
    """
    return {
        "generated_at": routine.generated_at,
        "weeks": [
            {
                "week": week.week_number,
                "days": [
                    {
                        "slot": slot.slot_number,
                        "muscle": slot.muscle,
                        "exercises": [exercise_to_dict(e) for e in slot.exercises],
                        "notes": slot.notes,
                    }
                    for slot in week.days
                ],
            }
            for week in routine.weeks
        ],
    }


def dict_to_routine(data: dict[str, Any]) -> Routine:
    """
    Convert dict to Routine.

    Args:
        data: Dict representation

    Returns:
        Routine instance

    Raises:
        ValidationError: If a required key is missing or has the wrong shape
    """
    generated_at = str(_require(data, "generated_at", "routine"))
    raw_weeks = _require(data, "weeks", "routine")
    if not isinstance(raw_weeks, list):
        raise ValidationError("routine", "'weeks' must be a list")

    weeks: list[Week] = []
    for raw_week in raw_weeks:
        days: list[DaySlot] = []
        _require(raw_week, "days", "week")
        for raw_day in _list_of(raw_week, "days", "week"):
            muscle = str(_require(raw_day, "muscle", "day"))
            days.append(
                DaySlot(
                    slot_number=_require_int(raw_day, "slot", "day"),
                    muscle=muscle,
                    exercises=tuple(
                        dict_to_exercise(e, muscle) for e in _list_of(raw_day, "exercises", "day")
                    ),
                    notes=str(raw_day.get("notes", "")),
                )
            )
        weeks.append(Week(week_number=_require_int(raw_week, "week", "week"), days=tuple(days)))

    return Routine(generated_at=generated_at, weeks=tuple(weeks))


def profile_to_dict(profile: Profile) -> dict[str, Any]:
    """
    Convert Profile to JSON-compatible dict.

    Args:
        profile: Profile to convert

    Returns:
        Dict representation
    """
    return {
        "gender": profile.gender,
        "age": profile.age,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "objective": profile.objective,
        "days_per_week": profile.days_per_week,
        "selected_muscles": list(profile.selected_muscles),
        "routine": routine_to_dict(profile.routine) if profile.routine is not None else None,
    }


def dict_to_profile(data: dict[str, Any]) -> Profile:
    """
    Convert dict to Profile.

    Bounds are re-checked by Profile itself, so a hand-edited file with
    out-of-range values is rejected rather than silently loaded.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("profile", f"expected an object, got {type(data).__name__}")
    raw_routine = data.get("routine")
    return Profile(
        gender=data.get("gender") or "",
        age=data.get("age"),
        height_cm=data.get("height_cm"),
        weight_kg=data.get("weight_kg"),
        objective=data.get("objective") or "",
        days_per_week=data.get("days_per_week"),
        selected_muscles=_list_of(data, "selected_muscles", "profile"),
        routine=dict_to_routine(raw_routine) if raw_routine else None,
    )


def user_document(user_id: str, created_at: str, profile: Profile) -> dict[str, Any]:
    """Build the on-disk document for one user."""
    return {
        "user_id": user_id,
        "created_at": created_at,
        "profile": profile_to_dict(profile),
    }


def routine_to_json(routine: Routine) -> str:
    """Serialize a routine to an indented JSON string (used by ``show-routine --json``)."""
    return json.dumps(routine_to_dict(routine), indent=2)
