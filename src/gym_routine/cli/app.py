"""Shared Typer app object, shared option types, and service factory."""

import random
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.profile_store import ProfileStore, get_default_data_dir
from ..service import RoutineService

# Shared --user option type used across all commands
UserOption = Annotated[
    str,
    typer.Option("--user", "-u", help="User id whose profile to use"),
]

# Shared --data-dir option type used across all commands
DataDirOption = Annotated[
    Optional[Path],
    typer.Option("--data-dir", "-p", help="Directory holding profile JSON files"),
]

app = typer.Typer(
    name="gym-routine",
    help="Build multi-week gym routines from the muscle groups you want to train.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_store(data_dir: Path | None) -> ProfileStore:
    """Get profile store from path or default location."""
    if data_dir is None:
        data_dir = get_default_data_dir()
    return ProfileStore(data_dir)


def get_service(data_dir: Path | None, seed: int | None = None) -> RoutineService:
    """Build a RoutineService for one CLI invocation."""
    rng = random.Random(seed) if seed is not None else None
    return RoutineService(get_store(data_dir), rng=rng)
