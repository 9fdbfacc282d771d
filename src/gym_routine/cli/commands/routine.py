"""Routine commands: generate, shuffle, show-routine, muscles."""

from typing import Annotated, Optional

import typer

from ...core.config import DEFAULT_USER_ID
from ...core.errors import RoutineError
from ...io.serializers import routine_to_json
from .. import views
from ..app import DataDirOption, UserOption, app, get_service

NotesOption = Annotated[
    bool,
    typer.Option("--notes", "-n", help="Show per-day notes"),
]


@app.command()
def generate(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    objective: Annotated[
        Optional[str],
        typer.Option("--objective", "-o", help="Objective for this routine only"),
    ] = None,
    days_per_week: Annotated[
        Optional[int],
        typer.Option("--days-per-week", "-d", help="Days per week for this routine only (2-6)"),
    ] = None,
    muscles: Annotated[
        Optional[list[str]],
        typer.Option("--muscle", "-m", help="Muscle selection for this routine only (repeatable)"),
    ] = None,
    weeks: Annotated[
        Optional[int],
        typer.Option("--weeks", min=1, help="Number of weeks (default from routine.yaml, 3)"),
    ] = None,
    show_notes: NotesOption = False,
) -> None:
    """
    Generate a routine from the profile and store it.

    Muscles rotate across training days in selection order, continuing from
    one week to the next.  Overrides apply to this routine only and are not
    saved to the profile.
    """
    service = get_service(data_dir)
    try:
        routine = service.generate_routine(
            user_id,
            objective=objective,
            days_per_week=days_per_week,
            muscles=muscles,
            week_count=weeks,
        )
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success("Generated routine")
    views.print_routine(routine, show_notes=show_notes)


@app.command()
def shuffle(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for a reproducible shuffle"),
    ] = None,
    show_notes: NotesOption = False,
) -> None:
    """
    Reshuffle the muscle order of the stored routine.

    Keeps the same muscles, days per week and number of weeks.
    """
    service = get_service(data_dir, seed=seed)
    try:
        routine = service.shuffle_routine(user_id)
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success("Shuffled routine")
    views.print_routine(routine, show_notes=show_notes)


@app.command("show-routine")
def show_routine(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    show_notes: NotesOption = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the stored routine as JSON"),
    ] = False,
) -> None:
    """
    Show the stored routine.
    """
    service = get_service(data_dir)
    try:
        profile = service.get_profile(user_id)
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        if profile.routine is None:
            views.print_error("No routine generated yet.")
            raise typer.Exit(1)
        typer.echo(routine_to_json(profile.routine))
        return

    views.print_routine(profile.routine, show_notes=show_notes)
    if profile.routine is None:
        views.print_info("Run 'generate' to build one.")


@app.command()
def muscles(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    muscle: Annotated[
        Optional[str],
        typer.Option("--muscle", "-m", help="Show the exercises of one muscle group"),
    ] = None,
) -> None:
    """
    List the muscle groups in the exercise catalog.
    """
    service = get_service(data_dir)
    catalog = service.catalog

    if muscle is not None:
        if muscle not in catalog:
            views.print_error(f"Unknown muscle group '{muscle}'")
            views.print_info(f"Valid groups: {', '.join(catalog)}")
            raise typer.Exit(1)
        views.print_muscle_exercises(muscle, catalog.exercises_for(muscle))
        return

    selected: list[str] = []
    try:
        if service.store.exists(user_id):
            selected = service.get_profile(user_id).selected_muscles
    except RoutineError as e:
        views.print_warning(f"Could not read profile: {e}")
    views.print_catalog(catalog, selected)
