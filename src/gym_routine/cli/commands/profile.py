"""Profile management commands: init, update-profile, show-profile, delete-profile."""

from typing import Annotated, Optional

import typer

from ...core.config import DEFAULT_USER_ID
from ...core.errors import RoutineError
from .. import views
from ..app import DataDirOption, UserOption, app, get_service

GenderOption = Annotated[
    Optional[str],
    typer.Option("--gender", "-g", help="Gender (male/female)"),
]
AgeOption = Annotated[
    Optional[int],
    typer.Option("--age", "-a", help="Age in years (16-120)"),
]
HeightOption = Annotated[
    Optional[int],
    typer.Option("--height-cm", help="Height in centimeters (100-275)"),
]
WeightOption = Annotated[
    Optional[float],
    typer.Option("--weight-kg", "-w", help="Bodyweight in kg (30-300)"),
]
ObjectiveOption = Annotated[
    Optional[str],
    typer.Option("--objective", "-o", help="Training objective, e.g. hypertrophy"),
]
DaysOption = Annotated[
    Optional[int],
    typer.Option("--days-per-week", "-d", help="Training days per week (2-6)"),
]
MuscleOption = Annotated[
    Optional[list[str]],
    typer.Option("--muscle", "-m", help="Muscle group to train (repeat for several, order is kept)"),
]


def _profile_fields(
    gender: str | None,
    age: int | None,
    height_cm: int | None,
    weight_kg: float | None,
    objective: str | None,
    days_per_week: int | None,
    muscles: list[str] | None,
) -> dict:
    """Map CLI options to profile field names, in validation order."""
    return {
        "gender": gender,
        "age": age,
        "height_cm": height_cm,
        "weight_kg": weight_kg,
        "objective": objective,
        "days_per_week": days_per_week,
        "selected_muscles": muscles,
    }


@app.command()
def init(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    gender: GenderOption = None,
    age: AgeOption = None,
    height_cm: HeightOption = None,
    weight_kg: WeightOption = None,
    objective: ObjectiveOption = None,
    days_per_week: DaysOption = None,
    muscles: MuscleOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing profile without prompting"),
    ] = False,
) -> None:
    """
    Create a profile.

    Every field is optional here and can be filled in later with
    update-profile; a routine needs at least --days-per-week and one --muscle.

      gym-routine init -g female -a 30 -d 3 -m Lats -m "Upper Chest"
    """
    service = get_service(data_dir)

    try:
        exists = service.store.exists(user_id)
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    overwrite = force
    if exists and not force:
        views.print_warning(f"A profile for '{user_id}' already exists.")
        if not views.confirm_action("Overwrite it (the current routine is discarded)?"):
            views.print_info("Cancelled.")
            raise typer.Exit(0)
        overwrite = True

    try:
        profile = service.create_profile(
            user_id,
            overwrite=overwrite,
            **_profile_fields(gender, age, height_cm, weight_kg, objective, days_per_week, muscles),
        )
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success(f"Initialized profile for '{user_id}' at {service.store.path_for(user_id)}")
    views.print_profile(profile, user_id)
    if not profile.is_ready_for_routine():
        views.print_info("Set --days-per-week and at least one --muscle with update-profile, then run 'generate'.")


@app.command("update-profile")
def update_profile(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    gender: GenderOption = None,
    age: AgeOption = None,
    height_cm: HeightOption = None,
    weight_kg: WeightOption = None,
    objective: ObjectiveOption = None,
    days_per_week: DaysOption = None,
    muscles: MuscleOption = None,
) -> None:
    """
    Update profile fields. Options you leave out keep their current value.

    Passing --muscle replaces the whole selection with the listed groups.
    The stored routine is kept; run 'generate' to rebuild it.
    """
    service = get_service(data_dir)
    try:
        profile = service.update_profile(
            user_id,
            **_profile_fields(gender, age, height_cm, weight_kg, objective, days_per_week, muscles),
        )
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success("Profile updated")
    views.print_profile(profile, user_id)


@app.command("show-profile")
def show_profile(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
) -> None:
    """
    Show the stored profile.
    """
    service = get_service(data_dir)
    try:
        profile = service.get_profile(user_id)
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_profile(profile, user_id)


@app.command("delete-profile")
def delete_profile(
    user_id: UserOption = DEFAULT_USER_ID,
    data_dir: DataDirOption = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation"),
    ] = False,
) -> None:
    """
    Delete a profile and its routine.
    """
    service = get_service(data_dir)
    if not yes and not views.confirm_action(f"Delete profile '{user_id}' and its routine?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    try:
        service.delete_profile(user_id)
    except RoutineError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success(f"Deleted profile '{user_id}'")
