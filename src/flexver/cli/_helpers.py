"""Output helpers shared by CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..parser import ParseOutcome

console = Console()

SLOT_NAMES = ("major", "minor", "build", "revision", "excess")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def outcome_table(outcome: ParseOutcome) -> Table:
    """Render a ParseOutcome as a table.

    Only non-empty leftovers are listed.
    """
    table = Table(title=escape(f"Parsed {outcome.raw!r}"), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("status", f"{outcome.status.name} ({int(outcome.status)})")
    table.add_row("version", str(outcome.version) if outcome.version else "-")
    for name, leftover in zip(SLOT_NAMES, outcome.leftovers, strict=True):
        if leftover:
            table.add_row(f"leftover {name}", escape(leftover))
    return table
