"""Shared helpers for building and displaying a picker session."""

import sys
import tomllib
from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from periodpick.config import get_bounds, get_selected, parse_period
from periodpick.dates import default_bounds, period_date_range
from periodpick.domain.models import Granularity
from periodpick.domain.period import Period
from periodpick.domain.range_bound import RangeBoundPeriod

console = Console()


def resolve_bounds(minimum: str | None, maximum: str | None, today: date) -> tuple[Period, Period]:
    """Resolve bounds from flags, then config, then the built-in default.

    Args:
        minimum: Minimum bound flag value, if given.
        maximum: Maximum bound flag value, if given.
        today: Current date, used for the default bounds.

    Returns:
        Tuple of (minimum, maximum).

    Raises:
        ValueError: If a flag or configured bound is not a valid period.
    """
    fallback = get_bounds() or default_bounds(today)
    lower = parse_period(minimum) if minimum else fallback[0]
    upper = parse_period(maximum) if maximum else fallback[1]
    return lower, upper


def resolve_session(
    selected: str | None, minimum: str | None, maximum: str | None, today: date
) -> RangeBoundPeriod:
    """Build the session a command operates on.

    The selection comes from the flag, then the config, then the month
    containing today.
    """
    lower, upper = resolve_bounds(minimum, maximum, today)

    if selected:
        return RangeBoundPeriod(selected=parse_period(selected), minimum=lower, maximum=upper)

    configured = get_selected()
    if configured is not None:
        return RangeBoundPeriod(selected=configured, minimum=lower, maximum=upper)

    return RangeBoundPeriod.starting_at(today, lower, upper)


def load_session_or_exit(selected: str | None, minimum: str | None, maximum: str | None) -> RangeBoundPeriod:
    """Resolve the session for today, exiting with an error on bad input."""
    try:
        return resolve_session(selected, minimum, maximum, date.today())
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config file is not valid TOML: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def format_flag(allowed: bool) -> str:
    """Format a yes/no flag with color."""
    return "[green]yes[/green]" if allowed else "[red]no[/red]"


def render_session(session: RangeBoundPeriod, title: str = "Period") -> None:
    """Print the selection, its date span, the bounds and navigation flags.

    Args:
        session: Session to display.
        title: Table title.
    """
    since, until = period_date_range(session.selected)

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Selected", session.selected.description)
    table.add_row("Granularity", session.selected.granularity.value)
    if since and until:
        span = f"{since} to {until}"
    elif session.selected.granularity is Granularity.UNBOUNDED:
        span = "all time"
    else:
        span = "outside the supported calendar (years 1-9999)"
    table.add_row("Span", span)
    table.add_row("Minimum", session.minimum.description)
    table.add_row("Maximum", session.maximum.description)
    table.add_row("Can move previous", format_flag(session.can_move_previous()))
    table.add_row("Can move next", format_flag(session.can_move_next()))

    console.print(table)
