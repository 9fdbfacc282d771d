"""
Exercise catalog for gym-routine.

Maps each muscle group to the ordered exercises the routine assembler
draws from.
"""

from .base import Catalog, ExerciseDefinition
from .registry import get_default_catalog, get_exercises

__all__ = [
    "Catalog",
    "ExerciseDefinition",
    "get_default_catalog",
    "get_exercises",
]
