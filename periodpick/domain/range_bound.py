"""A selected period held between inclusive bounds.

RangeBoundPeriod is what a picker session works on: the current selection
plus the minimum and maximum the user may reach. Every operation returns a
new value; a refused operation returns the same value unchanged.

Navigation refuses rather than clamps: a step that would leave the range is
dropped entirely, it is never snapped onto the bound. Bounds are not
validated, so reversed bounds simply make every step refuse.
"""

from dataclasses import dataclass, replace
from datetime import date

from periodpick.domain.models import Granularity, MonthNumber, Ordering, Year
from periodpick.domain.options import available_months, available_years
from periodpick.domain.period import Period, compare


@dataclass(frozen=True)
class RangeBoundPeriod:
    """Immutable selection with inclusive minimum and maximum bounds."""

    selected: Period
    minimum: Period
    maximum: Period

    @classmethod
    def starting_at(
        cls,
        today: date,
        minimum: Period,
        maximum: Period,
        granularity: Granularity = Granularity.MONTH,
    ) -> "RangeBoundPeriod":
        """Start a session on the period containing ``today``.

        Args:
            today: Current date, supplied by the caller.
            minimum: Lower bound.
            maximum: Upper bound.
            granularity: Granularity of the initial selection.

        Returns:
            New RangeBoundPeriod.
        """
        match granularity:
            case Granularity.UNBOUNDED:
                selected = Period.unbounded()
            case Granularity.YEAR:
                selected = Period.year_of(today)
            case Granularity.MONTH:
                selected = Period.year_month_of(today)
        return cls(selected=selected, minimum=minimum, maximum=maximum)

    def with_selected(self, period: Period) -> "RangeBoundPeriod":
        """Replace the selection without any bound check."""
        return replace(self, selected=period)

    def can_move_previous(self) -> bool:
        """True unless the selection is at or below the minimum."""
        return compare(self.selected, self.minimum) not in (Ordering.ASCENDING, Ordering.SAME)

    def can_move_next(self) -> bool:
        """True unless the selection is at or above the maximum."""
        return compare(self.selected, self.maximum) not in (Ordering.DESCENDING, Ordering.SAME)

    def move_to_previous_if_possible(self) -> "RangeBoundPeriod":
        candidate = self.selected.previous()
        if not _within_lower(candidate, self.minimum):
            return self
        return self.with_selected(candidate)

    def move_to_next_if_possible(self) -> "RangeBoundPeriod":
        candidate = self.selected.next()
        if not _within_upper(candidate, self.maximum):
            return self
        return self.with_selected(candidate)

    def contains(self, period: Period) -> bool:
        """Check whether a period lies between the bounds (year-first rule)."""
        return _within_lower(period, self.minimum) and _within_upper(period, self.maximum)

    def select_year(self, year: int | None) -> "RangeBoundPeriod":
        """Apply a year picked in the UI.

        A new year keeps the month already selected, if any. Clearing the
        year collapses the selection to unbounded.
        """
        if year is None:
            return self.with_selected(Period.unbounded())
        return self.with_selected(Period.of(year, self.selected.month))

    def select_month(self, month: int | None) -> "RangeBoundPeriod":
        """Apply a month picked in the UI.

        Without a selected year, a month anchors to the minimum bound's
        year. If the minimum has no year either, the pick is ignored.
        """
        year = self.selected.year
        if year is None and month is not None:
            if self.minimum.year is None:
                return self
            year = self.minimum.year
        return self.with_selected(Period.of(year, month))

    def available_years(self) -> list[Year]:
        return available_years(self.minimum, self.maximum)

    def available_months(self) -> list[MonthNumber]:
        """Month options for the currently selected year."""
        return available_months(self.selected.year, self.minimum, self.maximum)


def _within_lower(period: Period, minimum: Period) -> bool:
    # An unbounded minimum is an open bound
    if minimum.granularity is Granularity.UNBOUNDED:
        return True
    return compare(period, minimum) in (Ordering.SAME, Ordering.DESCENDING)


def _within_upper(period: Period, maximum: Period) -> bool:
    if maximum.granularity is Granularity.UNBOUNDED:
        return True
    return compare(period, maximum) in (Ordering.SAME, Ordering.ASCENDING)
