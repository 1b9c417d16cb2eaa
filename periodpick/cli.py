"""CLI entry point for periodpick."""

import typer

from periodpick.commands.admin import init_command
from periodpick.commands.navigate import select_command, show_command, step_command
from periodpick.commands.options import options_command

app = typer.Typer(
    name="periodpick",
    help="Navigate year/month periods within fixed bounds",
    add_completion=False,
)

SELECTED_HELP = "Selected period: 'all', YYYY or YYYY-MM (default: config, then current month)"
MINIMUM_HELP = "Minimum bound: YYYY or YYYY-MM (default: config)"
MAXIMUM_HELP = "Maximum bound: YYYY or YYYY-MM (default: config)"


@app.callback()
def main() -> None:
    """Navigate year/month periods within fixed bounds."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    minimum: str = typer.Option(None, "--minimum", help="Minimum bound (default: January five years ago)"),
    maximum: str = typer.Option(None, "--maximum", help="Maximum bound (default: current month)"),
) -> None:
    """Initialize periodpick configuration."""
    init_command(force, minimum, maximum)


@app.command()
def show(
    selected: str = typer.Option(None, "--selected", "-s", help=SELECTED_HELP),
    minimum: str = typer.Option(None, "--minimum", help=MINIMUM_HELP),
    maximum: str = typer.Option(None, "--maximum", help=MAXIMUM_HELP),
) -> None:
    """Show the selected period and its bounds."""
    show_command(selected, minimum, maximum)


@app.command()
def step(
    direction: str = typer.Argument(..., help="Direction to move: 'next' or 'previous'"),
    count: int = typer.Option(1, "--count", "-n", help="Number of steps to take"),
    selected: str = typer.Option(None, "--selected", "-s", help=SELECTED_HELP),
    minimum: str = typer.Option(None, "--minimum", help=MINIMUM_HELP),
    maximum: str = typer.Option(None, "--maximum", help=MAXIMUM_HELP),
) -> None:
    """Step the selected period, refusing steps that leave the bounds."""
    step_command(direction, count, selected, minimum, maximum)


@app.command()
def select(
    year: int = typer.Option(None, "--year", "-y", help="Year to select (keeps the selected month)"),
    clear_year: bool = typer.Option(False, "--clear-year", help="Clear the year (select all time)"),
    month: int = typer.Option(None, "--month", "-m", help="Month to select (1-12)"),
    clear_month: bool = typer.Option(False, "--clear-month", help="Clear the month (select whole year)"),
    selected: str = typer.Option(None, "--selected", "-s", help=SELECTED_HELP),
    minimum: str = typer.Option(None, "--minimum", help=MINIMUM_HELP),
    maximum: str = typer.Option(None, "--maximum", help=MAXIMUM_HELP),
) -> None:
    """Pick a year and/or month the way a picker menu would."""
    select_command(year, clear_year, month, clear_month, selected, minimum, maximum)


@app.command()
def options(
    year: int = typer.Option(None, "--year", "-y", help="Show months for this year (default: selected year)"),
    selected: str = typer.Option(None, "--selected", "-s", help=SELECTED_HELP),
    minimum: str = typer.Option(None, "--minimum", help=MINIMUM_HELP),
    maximum: str = typer.Option(None, "--maximum", help=MAXIMUM_HELP),
) -> None:
    """List the years and months a picker would offer."""
    options_command(year, selected, minimum, maximum)


if __name__ == "__main__":
    app()
