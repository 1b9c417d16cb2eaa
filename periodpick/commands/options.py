"""Options command: list the years and months a picker would offer."""

from rich.console import Console
from rich.table import Table

from periodpick.commands.session import load_session_or_exit
from periodpick.domain.models import MonthNumber, Year

console = Console()


def render_options(title: str, values: list[Year] | list[MonthNumber], highlight: int | None) -> None:
    """Print one option list, marking the currently selected value.

    Args:
        title: Table title.
        values: Options in display order.
        highlight: Selected value to mark, if any.
    """
    console.print(f"[bold]{title}[/bold]")

    table = Table()
    table.add_column("", width=1)
    table.add_column("Option", justify="right")

    for value in values:
        marker = "[green]●[/green]" if value == highlight else ""
        table.add_row(marker, str(value))

    console.print(table)


def options_command(year: int | None, selected: str | None, minimum: str | None, maximum: str | None) -> None:
    """Show selectable years and months for the session bounds."""
    session = load_session_or_exit(selected, minimum, maximum)

    years = session.available_years()
    if not years:
        console.print("[yellow]No selectable years: bounds are open or reversed[/yellow]")
        return

    if year is not None:
        session = session.select_year(year)

    render_options(
        f"Years ({session.minimum.description} to {session.maximum.description})",
        years,
        session.selected.year,
    )

    for_year = session.selected.year
    if for_year is None:
        console.print("[dim]Pick a year to see its months[/dim]")
        return

    months = session.available_months()
    if not months:
        console.print(f"[yellow]No selectable months in {for_year}[/yellow]")
        return

    render_options(f"Months in {for_year}", months, session.selected.month)
