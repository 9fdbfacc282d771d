"""
YAML → typed routine settings loader.

Loads routine shape settings from routine.yaml (bundled with the package) and
optionally merges user overrides from ~/.gym-routine/routine.yaml.

Usage:
    from gym_routine.core.engine.config_loader import load_routine_settings
    settings = load_routine_settings()
    settings.week_count

If the bundled YAML cannot be parsed, the Python defaults from config.py are
used.  If the user override file has parse errors or out-of-range values, a
warning is emitted and the offending values are ignored.
"""

from __future__ import annotations

import importlib.resources
import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ..config import DEFAULT_HOME_DIRNAME, EXERCISES_PER_SLOT, HOME_ENV_VAR, WEEK_COUNT

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; return {} if the file is unreadable or not a mapping."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"gym-routine: could not read {path} ({exc}); ignoring it.", stacklevel=2)
        return {}
    return data if isinstance(data, dict) else {}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoutineSettings:
    """Shape of generated routines."""

    week_count: int = WEEK_COUNT
    exercises_per_slot: int = EXERCISES_PER_SLOT

    def __post_init__(self) -> None:
        if self.week_count < 1:
            raise ValueError(f"week_count must be at least 1, got {self.week_count}")
        if not 1 <= self.exercises_per_slot <= EXERCISES_PER_SLOT:
            raise ValueError(
                f"exercises_per_slot must be between 1 and {EXERCISES_PER_SLOT}, "
                f"got {self.exercises_per_slot}"
            )


def get_home_dir() -> Path:
    """Return the gym-routine base directory ($GYM_ROUTINE_HOME or ~/.gym-routine)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HOME_DIRNAME


def get_bundled_path(filename: str) -> Path | None:
    """Return the path of a YAML file bundled inside the package, or None."""
    ref = importlib.resources.files("gym_routine").joinpath(filename)
    with importlib.resources.as_file(ref) as p:
        return p if p.exists() else None


def get_user_path(filename: str) -> Path | None:
    """Return ~/.gym-routine/<filename> if it exists, else None."""
    p = get_home_dir() / filename
    return p if p.exists() else None


def load_model_config(filename: str = "routine.yaml") -> dict[str, Any]:
    """
    Load and merge configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/gym_routine/<filename>
    2. User override at ~/.gym-routine/<filename>

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_path(filename)
    if bundled is not None:
        config = deep_merge(config, load_yaml_file(bundled))

    user = get_user_path(filename)
    if user is not None:
        user_cfg = load_yaml_file(user)
        if user_cfg:
            logger.debug("Merging user config", path=str(user))
            config = deep_merge(config, user_cfg)

    return config


def _positive_int(
    section: dict[str, Any], key: str, default: int, maximum: int | None = None
) -> int:
    raw = section.get(key, default)
    if (
        isinstance(raw, bool)
        or not isinstance(raw, int)
        or raw < 1
        or (maximum is not None and raw > maximum)
    ):
        limit = f" no greater than {maximum}" if maximum is not None else ""
        warnings.warn(
            f"gym-routine: routine.{key} must be a positive integer{limit}, got {raw!r}; "
            f"using {default}.",
            stacklevel=3,
        )
        return default
    return raw


def load_routine_settings() -> RoutineSettings:
    """Return RoutineSettings from the merged routine.yaml sources."""
    section = load_model_config("routine.yaml").get("routine") or {}
    if not isinstance(section, dict):
        section = {}
    return RoutineSettings(
        week_count=_positive_int(section, "week_count", WEEK_COUNT),
        exercises_per_slot=_positive_int(
            section, "exercises_per_slot", EXERCISES_PER_SLOT, maximum=EXERCISES_PER_SLOT
        ),
    )
