"""Date utilities for periodpick.

Pure functions bridging calendar dates and periods. "Today" is always an
argument; only the CLI layer reads the clock.
"""

from datetime import MAXYEAR, MINYEAR, date

from periodpick.domain.models import Granularity
from periodpick.domain.period import Period


def period_date_range(period: Period) -> tuple[str | None, str | None]:
    """Calculate the date span covered by a period.

    Args:
        period: Period to expand.

    Returns:
        Tuple of (since_date, until_date) where:
        - since_date: First day of the period (YYYY-MM-DD)
        - until_date: First day after the period (YYYY-MM-DD)
        Both are None for an unbounded period (all time) and for periods
        the calendar cannot represent (before year 1, or ending after 9999).
    """
    if not in_calendar(period):
        return None, None

    match period.granularity:
        case Granularity.YEAR:
            assert period.year is not None
            since = date(period.year, 1, 1)
            until = date(period.year + 1, 1, 1)
        case Granularity.MONTH:
            assert period.year is not None and period.month is not None
            since = date(period.year, period.month, 1)
            following = period.next()
            assert following.year is not None and following.month is not None
            until = date(following.year, following.month, 1)
    return since.isoformat(), until.isoformat()


def in_calendar(period: Period) -> bool:
    """Check that a bounded period starts and ends inside years MINYEAR..MAXYEAR.

    Periods may hold any integer year; datetime.date cannot.
    """
    following = period.next()
    if period.year is None or following.year is None:
        return False
    return period.year >= MINYEAR and following.year <= MAXYEAR


def period_from_date(d: date, granularity: Granularity) -> Period:
    """Truncate a date to a period of the given granularity.

    Args:
        d: Date (or datetime) to truncate.
        granularity: Target granularity; UNBOUNDED ignores the date.

    Returns:
        Period containing the date.
    """
    match granularity:
        case Granularity.UNBOUNDED:
            return Period.unbounded()
        case Granularity.YEAR:
            return Period.year_of(d)
        case Granularity.MONTH:
            return Period.year_month_of(d)


def default_bounds(today: date, years_back: int = 5) -> tuple[Period, Period]:
    """Bounds used when nothing is configured.

    Args:
        today: Current date.
        years_back: How many whole years before today the range starts.

    Returns:
        Tuple of (minimum, maximum): January ``years_back`` years ago up to
        the month containing today.
    """
    return Period.year_month(today.year - years_back, 1), Period.year_month_of(today)
