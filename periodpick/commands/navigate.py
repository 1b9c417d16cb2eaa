"""Show, step and select commands for navigating a period."""

import sys

from rich.console import Console

from periodpick.commands.session import load_session_or_exit, render_session
from periodpick.domain.models import Granularity
from periodpick.domain.range_bound import RangeBoundPeriod

console = Console()

DIRECTIONS = ("next", "previous")


def show_command(selected: str | None, minimum: str | None, maximum: str | None) -> None:
    """Display the current selection and bounds."""
    session = load_session_or_exit(selected, minimum, maximum)
    render_session(session)


def apply_steps(session: RangeBoundPeriod, direction: str, count: int) -> tuple[RangeBoundPeriod, int]:
    """Step a session repeatedly, stopping at the first refused step.

    Args:
        session: Starting session.
        direction: "next" or "previous".
        count: Maximum number of steps.

    Returns:
        Tuple of (final session, steps actually taken).
    """
    taken = 0
    for _ in range(count):
        if direction == "next":
            moved = session.move_to_next_if_possible()
        else:
            moved = session.move_to_previous_if_possible()
        if moved == session:
            break
        session = moved
        taken += 1
    return session, taken


def step_command(
    direction: str,
    count: int,
    selected: str | None,
    minimum: str | None,
    maximum: str | None,
) -> None:
    """Move the selection forward or back within its bounds."""
    if direction not in DIRECTIONS:
        console.print(f"[red]Direction must be one of: {', '.join(DIRECTIONS)}[/red]", style="bold")
        sys.exit(1)

    if count < 1:
        console.print("[red]Count must be at least 1[/red]", style="bold")
        sys.exit(1)

    session = load_session_or_exit(selected, minimum, maximum)
    start = session.selected
    session, taken = apply_steps(session, direction, count)

    if taken == 0:
        console.print(f"[yellow]Cannot move {direction} from {start.description}[/yellow]")
    elif taken < count:
        console.print(
            f"[yellow]Moved {taken} of {count} step(s); stopped at the {direction} bound[/yellow]"
        )
    else:
        console.print(f"[green]✓[/green] Moved {taken} step(s) {direction}")

    render_session(session)


def select_command(
    year: int | None,
    clear_year: bool,
    month: int | None,
    clear_month: bool,
    selected: str | None,
    minimum: str | None,
    maximum: str | None,
) -> None:
    """Apply year/month picks to the selection."""
    if year is not None and clear_year:
        console.print("[red]Use either --year or --clear-year, not both[/red]", style="bold")
        sys.exit(1)

    if month is not None and clear_month:
        console.print("[red]Use either --month or --clear-month, not both[/red]", style="bold")
        sys.exit(1)

    if year is None and month is None and not clear_year and not clear_month:
        console.print("[red]Nothing to select. Pass --year, --month or a --clear option.[/red]", style="bold")
        sys.exit(1)

    if month is not None and not 1 <= month <= 12:
        console.print(f"[red]Month {month} is not between 1 and 12[/red]", style="bold")
        sys.exit(1)

    session = load_session_or_exit(selected, minimum, maximum)

    if year is not None or clear_year:
        session = session.select_year(year)
    if month is not None and session.selected.year is None and session.minimum.year is None:
        console.print(f"[yellow]Cannot select month {month}: no minimum year to anchor the month to[/yellow]")
    elif month is not None or clear_month:
        session = session.select_month(month)

    if session.selected.granularity is not Granularity.UNBOUNDED and not session.contains(session.selected):
        console.print(f"[yellow]Selection {session.selected.description} is outside the bounds[/yellow]")

    render_session(session)
