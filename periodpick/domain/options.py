"""Pure functions that derive picker options from period bounds.

Both lists are returned most-recent-first. That ordering is part of the
contract: pickers render the newest year and month at the top.
"""

from periodpick.domain.models import MonthNumber, Year
from periodpick.domain.period import Period


def available_years(minimum: Period, maximum: Period) -> list[Year]:
    """List selectable years between two bounds, newest first.

    Args:
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive).

    Returns:
        Years from maximum.year down to minimum.year. Empty when either
        bound has no year or the bounds are reversed.
    """
    if minimum.year is None or maximum.year is None:
        return []
    return [Year(y) for y in range(maximum.year, minimum.year - 1, -1)]


def available_months(for_year: int | None, minimum: Period, maximum: Period) -> list[MonthNumber]:
    """List selectable months of a year between two bounds, newest first.

    The minimum bound clamps the start month only in its own year, the
    maximum bound clamps the end month only in its own year. When both
    bounds share the year both clamps apply. A year-only bound does not
    clamp.

    Args:
        for_year: Year whose months are wanted. None means no year picked.
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive).

    Returns:
        Months from end down to start, or an empty list when no year is
        given or the clamps cross.
    """
    if for_year is None:
        return []

    start = minimum.month if for_year == minimum.year and minimum.month is not None else 1
    end = maximum.month if for_year == maximum.year and maximum.month is not None else 12

    return [MonthNumber(m) for m in range(end, start - 1, -1)]
