"""
Catalog registry.

The default catalog is loaded lazily from the bundled ``catalog.yaml`` (plus
the user override in ``~/.gym-routine/catalog.yaml``) on first use and then
reused.  If no muscle group can be loaded a RuntimeError is raised: routines
cannot be built without a catalog.

Callers that need a different catalog (tests, alternative data sets) build
one with ``Catalog({...})`` and pass it explicitly.
"""

from functools import lru_cache

from .base import Catalog, ExerciseDefinition


@lru_cache(maxsize=1)
def get_default_catalog() -> Catalog:
    """Return the bundled (user-merged) exercise catalog."""
    from .loader import load_catalog_from_yaml

    loaded = load_catalog_from_yaml()
    if loaded is None:
        raise RuntimeError(
            "gym-routine: no muscle groups could be loaded from YAML. "
            "Check that src/gym_routine/catalog.yaml is present and valid."
        )
    return loaded


def get_exercises(muscle_group: str, catalog: Catalog | None = None) -> tuple[ExerciseDefinition, ...]:
    """
    Return the exercises for a muscle group.

    Args:
        muscle_group: Catalog group name, e.g. "Lats"
        catalog: Catalog to read from (default: the bundled catalog)

    Raises:
        ValueError: If the group is not in the catalog
    """
    catalog = catalog if catalog is not None else get_default_catalog()
    if muscle_group not in catalog:
        valid = ", ".join(catalog)
        raise ValueError(f"Unknown muscle group '{muscle_group}'. Valid groups: {valid}")
    return catalog.exercises_for(muscle_group)
