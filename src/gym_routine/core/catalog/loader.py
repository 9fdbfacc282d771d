"""
YAML → Catalog loader.

Loads the bundled ``src/gym_routine/catalog.yaml``, a mapping of muscle
group name to an ordered list of ``{name, description, media_ref}`` entries.

User overrides: ``~/.gym-routine/catalog.yaml`` with the same layout.  A
group listed there replaces the bundled list for that group (lists are not
merged element-wise, since order drives exercise selection); a group absent
from the bundled file is added.

Usage (internal, called by registry.py):
    from .loader import load_catalog_from_yaml
    catalog = load_catalog_from_yaml()   # Catalog or None when nothing loaded
"""

from __future__ import annotations

import warnings
from pathlib import Path

from loguru import logger

from ..engine.config_loader import get_bundled_path, get_user_path, load_yaml_file
from .base import Catalog, ExerciseDefinition

CATALOG_FILENAME = "catalog.yaml"

_REQUIRED_EXERCISE_FIELDS: frozenset[str] = frozenset({"name", "description"})


def exercise_from_dict(d: dict, muscle_group: str) -> ExerciseDefinition:
    """Convert a raw dict (from YAML) to an ExerciseDefinition.

    ``media_ref`` is optional; ``gif`` is accepted as an alias.
    Raises ValueError if a required field is absent.
    """
    if not isinstance(d, dict):
        raise ValueError(f"exercise entry must be a mapping, got {type(d).__name__}")
    missing = _REQUIRED_EXERCISE_FIELDS - set(d)
    if missing:
        raise ValueError(f"exercise missing fields: {sorted(missing)}")
    return ExerciseDefinition(
        name=str(d["name"]),
        description=str(d["description"]),
        media_ref=str(d.get("media_ref", d.get("gif", ""))),
        muscle_group=muscle_group,
    )


def group_from_list(muscle_group: str, raw: object) -> tuple[ExerciseDefinition, ...]:
    """Convert one group's raw list to definitions, raising ValueError when unusable."""
    if not isinstance(raw, list) or not raw:
        raise ValueError("expected a non-empty list of exercises")
    return tuple(exercise_from_dict(entry, muscle_group) for entry in raw)


def catalog_from_dict(raw: dict, source: str = "catalog") -> Catalog:
    """Build a Catalog from a raw mapping, skipping (with a warning) unusable groups."""
    groups: dict[str, tuple[ExerciseDefinition, ...]] = {}
    for muscle_group, entries in raw.items():
        muscle_group = str(muscle_group)
        try:
            groups[muscle_group] = group_from_list(muscle_group, entries)
        except ValueError as exc:
            logger.warning("Skipping catalog group", group=muscle_group, source=source, reason=str(exc))
            warnings.warn(
                f"gym-routine: skipping muscle group '{muscle_group}' in {source}: {exc}",
                stacklevel=2,
            )
    return Catalog(groups)


def load_catalog_from_yaml(
    bundled_path: Path | None = None,
    user_path: Path | None = None,
) -> Catalog | None:
    """Return the merged Catalog, or None when no group could be loaded.

    Paths default to the bundled catalog.yaml and ~/.gym-routine/catalog.yaml.
    """
    if bundled_path is None:
        bundled_path = get_bundled_path(CATALOG_FILENAME)
    if user_path is None:
        user_path = get_user_path(CATALOG_FILENAME)

    raw: dict = {}
    if bundled_path is not None:
        raw.update(load_yaml_file(bundled_path))
    if user_path is not None and user_path.exists():
        user_raw = load_yaml_file(user_path)
        if user_raw:
            logger.debug("Merging user catalog", path=str(user_path), groups=len(user_raw))
            # Whole-group replacement: a user list supersedes the bundled one.
            raw.update(user_raw)

    if not raw:
        return None

    catalog = catalog_from_dict(raw, source=str(user_path or bundled_path))
    return catalog if len(catalog) else None
