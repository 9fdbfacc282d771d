"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of profiles, routines and the catalog.
"""

from rich.console import Console
from rich.table import Table

from ..core.catalog.base import Catalog, ExerciseDefinition
from ..core.models import Profile, Routine, Week

console = Console()


def _fmt_optional(value: object, unit: str = "") -> str:
    if value in (None, ""):
        return "-"
    if isinstance(value, float):
        return f"{value:.1f}{unit}"
    return f"{value}{unit}"


def format_profile_table(profile: Profile, user_id: str) -> Table:
    """
    Create a Rich table displaying a profile.

    Args:
        profile: Profile to display
        user_id: Owner, shown in the title

    Returns:
        Rich Table object
    """
    table = Table(title=f"Profile: {user_id}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Gender", _fmt_optional(profile.gender))
    table.add_row("Age", _fmt_optional(profile.age))
    table.add_row("Height", _fmt_optional(profile.height_cm, " cm"))
    table.add_row("Weight", _fmt_optional(profile.weight_kg, " kg"))
    table.add_row("Objective", _fmt_optional(profile.objective))
    table.add_row("Days/week", _fmt_optional(profile.days_per_week))
    table.add_row(
        "Muscles",
        ", ".join(profile.selected_muscles) if profile.selected_muscles else "-",
    )
    if profile.routine is not None:
        r = profile.routine
        table.add_row(
            "Routine",
            f"{r.week_count} weeks × {r.days_per_week} days (generated {r.generated_at})",
        )
    else:
        table.add_row("Routine", "[yellow]not generated[/yellow]")
    return table


def print_profile(profile: Profile, user_id: str) -> None:
    """Print a profile to the console."""
    console.print(format_profile_table(profile, user_id))


def _fmt_exercises(exercises: tuple[ExerciseDefinition, ...]) -> str:
    if not exercises:
        return "[yellow]no catalog exercises[/yellow]"
    return "\n".join(f"• {e.name}" for e in exercises)


def format_week_table(week: Week, show_notes: bool = False) -> Table:
    """
    Create a Rich table for one week of a routine.

    Args:
        week: Week to display
        show_notes: Add the per-slot notes column

    Returns:
        Rich Table object
    """
    table = Table(title=f"Week {week.week_number}", show_lines=True)

    table.add_column("Day", justify="right", style="dim", width=3)
    table.add_column("Muscle", style="magenta")
    table.add_column("Exercises", style="green")
    if show_notes:
        table.add_column("Notes", style="dim")

    for slot in week.days:
        row = [str(slot.slot_number), slot.muscle, _fmt_exercises(slot.exercises)]
        if show_notes:
            row.append(slot.notes)
        table.add_row(*row)

    return table


def print_routine(routine: Routine | None, show_notes: bool = False) -> None:
    """
    Print every week of a routine.

    Args:
        routine: Routine to display (None prints a hint)
        show_notes: Include slot notes
    """
    if routine is None or not routine.weeks:
        console.print("[yellow]No routine generated yet.[/yellow]")
        return

    console.print(
        f"[bold]Routine[/bold]: {routine.week_count} weeks × "
        f"{routine.days_per_week} days  [dim](generated {routine.generated_at})[/dim]"
    )
    for week in routine.weeks:
        console.print(format_week_table(week, show_notes=show_notes))


def format_catalog_table(catalog: Catalog, selected: list[str] | None = None) -> Table:
    """Table of muscle groups with exercise counts; selected groups are marked."""
    selected = selected or []
    table = Table(title="Muscle groups")
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Muscle group", style="cyan")
    table.add_column("Exercises", justify="right")
    table.add_column("Selected", justify="center")

    for i, muscle in enumerate(catalog, 1):
        table.add_row(
            str(i),
            muscle,
            str(len(catalog.exercises_for(muscle))),
            "[green]✓[/green]" if muscle in selected else "",
        )
    return table


def print_catalog(catalog: Catalog, selected: list[str] | None = None) -> None:
    console.print(format_catalog_table(catalog, selected))


def print_muscle_exercises(muscle: str, exercises: tuple[ExerciseDefinition, ...]) -> None:
    """Print the ordered exercises of one muscle group."""
    table = Table(title=muscle)
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Exercise", style="green")
    table.add_column("Description")
    table.add_column("Media", style="dim")
    for i, e in enumerate(exercises, 1):
        table.add_row(str(i), e.name, e.description, e.media_ref or "-")
    console.print(table)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
