"""
Profile field validation and partial-update merging.

Bounds (inclusive) come from config.py:
    age 16–120, height 100–275 cm, weight 30–300 kg, days/week 2–6.

``apply_profile_update`` has merge semantics: absent or falsy values
(None, "", 0, empty list) keep the existing value.  The first invalid field
raises ValidationError and nothing is applied.
"""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING, Any, Mapping

from .config import (
    AGE_RANGE,
    DAYS_PER_WEEK_RANGE,
    GENDERS,
    HEIGHT_CM_RANGE,
    WEIGHT_KG_RANGE,
)
from .errors import ValidationError

if TYPE_CHECKING:
    from .catalog.base import Catalog
    from .models import Profile

PROFILE_FIELDS: tuple[str, ...] = (
    "gender",
    "age",
    "height_cm",
    "weight_kg",
    "objective",
    "days_per_week",
    "selected_muscles",
)

# field -> (bounds, integer-only)
_NUMERIC_FIELDS: dict[str, tuple[tuple[float, float], bool]] = {
    "age": (AGE_RANGE, True),
    "height_cm": (HEIGHT_CM_RANGE, True),
    "weight_kg": (WEIGHT_KG_RANGE, False),
    "days_per_week": (DAYS_PER_WEEK_RANGE, True),
}


def validate_number(field: str, value: Any) -> int | float:
    """
    Validate a bounded numeric profile field.

    Args:
        field: One of age, height_cm, weight_kg, days_per_week
        value: Candidate value

    Returns:
        The value as int (integer fields) or float (weight_kg)

    Raises:
        ValidationError: If value is not a number, not whole where required,
            or outside the field's bounds
    """
    (low, high), integer = _NUMERIC_FIELDS[field]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, f"must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(field, f"must be a finite number, got {value!r}")
    if integer and value != int(value):
        raise ValidationError(field, f"must be a whole number, got {value}")
    if not low <= value <= high:
        raise ValidationError(field, f"must be between {low:g} and {high:g}, got {value:g}")
    return int(value) if integer else float(value)


def validate_days_per_week(value: Any) -> int:
    """Validate training days per week (2–6)."""
    return int(validate_number("days_per_week", value))


def validate_week_count(value: Any) -> int:
    """Validate a generation week count (positive integer)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError("week_count", f"must be a positive integer, got {value!r}")
    return value


def validate_gender(value: Any) -> str:
    if not isinstance(value, str) or value.strip().lower() not in GENDERS:
        raise ValidationError("gender", f"must be one of {', '.join(GENDERS)}, got {value!r}")
    return value.strip().lower()


def validate_objective(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("objective", f"must be text, got {type(value).__name__}")
    return value.strip()


def validate_muscles(value: Any, catalog: Catalog | None = None) -> list[str]:
    """
    Validate a muscle selection.

    Strips names, drops duplicates keeping first occurrence, and (when a
    catalog is given) rejects names the catalog does not know.
    """
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError("selected_muscles", "must be a list of muscle group names")

    muscles: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ValidationError("selected_muscles", f"invalid muscle group name {item!r}")
        name = item.strip()
        if name not in muscles:
            muscles.append(name)

    if catalog is not None:
        unknown = catalog.unknown(muscles)
        if unknown:
            raise ValidationError(
                "selected_muscles", f"unknown muscle group(s): {', '.join(unknown)}"
            )
    return muscles


def normalize_field(field: str, value: Any, catalog: Catalog | None = None) -> Any:
    """Validate one profile field and return its normalised value."""
    if field in _NUMERIC_FIELDS:
        return validate_number(field, value)
    if field == "gender":
        return validate_gender(value)
    if field == "objective":
        return validate_objective(value)
    if field == "selected_muscles":
        return validate_muscles(value, catalog)
    raise ValidationError(field, "unknown profile field")


def _is_absent(value: Any) -> bool:
    """Absent/falsy update values leave the existing field unchanged."""
    return not value


def apply_profile_update(
    profile: Profile,
    updates: Mapping[str, Any],
    catalog: Catalog | None = None,
) -> Profile:
    """
    Merge a partial update into a profile.

    Args:
        profile: Current profile (never modified)
        updates: Field name → new value; falsy values are skipped
        catalog: If given, selected muscles must exist in it

    Returns:
        A new Profile with the changes applied (routine carried over)

    Raises:
        ValidationError: On the first unknown or invalid field
    """
    changes: dict[str, Any] = {}
    for field, value in updates.items():
        if field not in PROFILE_FIELDS:
            raise ValidationError(field, "unknown profile field")
        if _is_absent(value):
            continue
        changes[field] = normalize_field(field, value, catalog)
    return dataclasses.replace(profile, **changes)


def changed_fields(before: Profile, after: Profile) -> list[str]:
    """Names of profile fields whose values differ between two profiles."""
    return [f for f in PROFILE_FIELDS if getattr(before, f) != getattr(after, f)]
