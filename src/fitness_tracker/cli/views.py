"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of fitness records.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.grouping import group_by_day, sorted_day_labels
from ..core.models import FitnessRecord
from ..core.parameters import format_parameter
from .app import SHORT_ID_LENGTH

console = Console()


def short_id(record: FitnessRecord) -> str:
    """Leading characters of the record id, enough to pick it for delete."""
    return record.id[:SHORT_ID_LENGTH]


def _fmt_parameters(record: FitnessRecord) -> str:
    """One parameter per line, in entry order."""
    if not record.parameters:
        return "—"
    return "\n".join(format_parameter(p) for p in record.parameters)


def format_day_table(label: str, records: list[FitnessRecord]) -> Table:
    """
    Build the table for one day section.

    Args:
        label: Day label used as the table title
        records: Records of that day, in display order

    Returns:
        Rich Table
    """
    table = Table(title=label, title_justify="left", title_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Exercise", style="bold")
    table.add_column("Parameters")
    table.add_column("Notes", style="dim")

    for record in records:
        table.add_row(
            short_id(record),
            escape(record.exercise_name),
            escape(_fmt_parameters(record)),
            escape(record.notes),
        )

    return table


def print_records(records: list[FitnessRecord]) -> None:
    """
    Print records as one table per day.

    Days follow sorted_day_labels order; records within a day keep
    their logged order.
    """
    if not records:
        print_info("No records yet. Use 'add' to log an exercise.")
        return

    groups = group_by_day(records)
    for label in sorted_day_labels(groups):
        console.print(format_day_table(label, groups[label]))
        console.print()


def print_record_summary(record: FitnessRecord) -> None:
    """Print a short description of a single record."""
    console.print(f"[bold]{escape(record.exercise_name)}[/bold] [dim]({short_id(record)})[/dim]")
    for p in record.parameters:
        console.print(f"  {escape(format_parameter(p))}")
    if record.notes:
        console.print(f"  [dim]{escape(record.notes)}[/dim]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{escape(message)} [y/N]: ")
    return response.lower() in ("y", "yes")
