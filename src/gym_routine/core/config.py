"""
Configuration constants for routine assembly and profile validation.

Routine shape defaults can be overridden per user through
``~/.gym-routine/routine.yaml`` (see engine/config_loader.py).
"""

from typing import Final

# =============================================================================
# ROUTINE SHAPE
# =============================================================================

WEEK_COUNT: Final[int] = 3  # Weeks in a generated routine
EXERCISES_PER_SLOT: Final[int] = 3  # Upper bound on exercises per training day

# =============================================================================
# PROFILE BOUNDS (inclusive)
# =============================================================================

MIN_DAYS_PER_WEEK: Final[int] = 2
MAX_DAYS_PER_WEEK: Final[int] = 6

AGE_RANGE: Final[tuple[int, int]] = (16, 120)
HEIGHT_CM_RANGE: Final[tuple[int, int]] = (100, 275)
WEIGHT_KG_RANGE: Final[tuple[float, float]] = (30.0, 300.0)
DAYS_PER_WEEK_RANGE: Final[tuple[int, int]] = (MIN_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK)

GENDERS: Final[tuple[str, ...]] = ("male", "female")

# =============================================================================
# STORAGE
# =============================================================================

HOME_ENV_VAR: Final[str] = "GYM_ROUTINE_HOME"
DEFAULT_HOME_DIRNAME: Final[str] = ".gym-routine"
DEFAULT_USER_ID: Final[str] = "default"
