"""
CLI entry point using Typer.

Provides commands for the exercise log:
- add: Log an exercise
- list: Display records grouped by day
- delete: Remove a record by ID
"""

import typer

from . import views
from .app import SettingsPathOption, app
from .commands.records import _menu_delete_record, add_record, list_records


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context, settings_path: SettingsPathOption = None) -> None:
    """
    Fitness exercise log. Run without a command for interactive mode.

    --settings-path here applies to the interactive menu; commands take
    their own --settings-path.
    """
    if ctx.invoked_subcommand is not None:
        return  # A sub-command was given; let it handle things

    # ── Interactive main menu ───────────────────────────────────────────────
    views.console.print()
    views.console.print("[bold cyan]fitness-tracker[/bold cyan] — exercise log")
    views.console.print()

    menu = {
        "1": ("list",   "Show records"),
        "2": ("add",    "Log an exercise"),
        "3": ("delete", "Delete a record"),
        "0": ("quit",   "Quit"),
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

    if chosen == "list":
        ctx.invoke(list_records, settings_path=settings_path)
    elif chosen == "add":
        ctx.invoke(add_record, settings_path=settings_path)
    elif chosen == "delete":
        _menu_delete_record(settings_path)


if __name__ == "__main__":
    app()
