"""
CLI entry point using Typer.

Provides commands for routine management:
- init: Create a profile
- update-profile: Change profile fields
- show-profile: Display the profile
- muscles: List catalog muscle groups / exercises
- generate: Build and store a routine
- shuffle: Reshuffle the stored routine
- show-routine: Display the stored routine
- delete-profile: Remove a profile
"""

import typer

from . import views
from .app import app

# Importing the command modules registers their commands on ``app``.
from .commands.profile import show_profile
from .commands.routine import generate, muscles, show_routine, shuffle


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Gym routine builder. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return  # A sub-command was given

    # ── Interactive main menu ───────────────────────────────────────────────
    views.console.print()
    views.console.print("[bold cyan]gym-routine[/bold cyan]: routine builder")
    views.console.print()

    menu = {
        "1": ("show-routine", "Show my routine"),
        "2": ("generate",     "Generate a new routine"),
        "3": ("shuffle",      "Shuffle my routine"),
        "4": ("show-profile", "Show my profile"),
        "5": ("muscles",      "List muscle groups"),
        "0": ("quit",         "Quit"),
    }

    for key, (_, desc) in menu.items():
        views.console.print(f"  \\[{key}] {desc}")

    views.console.print()
    choice = views.console.input("Choose [1]: ").strip() or "1"

    if choice == "0":
        raise typer.Exit(0)

    cmd_map = {k: v[0] for k, v in menu.items()}
    chosen = cmd_map.get(choice)

    if chosen is None:
        views.print_error(f"Unknown choice: {choice}")
        raise typer.Exit(1)

    if chosen == "show-routine":
        ctx.invoke(show_routine)
    elif chosen == "generate":
        ctx.invoke(generate)
    elif chosen == "shuffle":
        ctx.invoke(shuffle)
    elif chosen == "show-profile":
        ctx.invoke(show_profile)
    elif chosen == "muscles":
        ctx.invoke(muscles)


if __name__ == "__main__":
    app()
