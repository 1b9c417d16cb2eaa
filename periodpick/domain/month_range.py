"""Month-only range calculator.

YearMonthRange is the plain-month counterpart of RangeBoundPeriod: a fixed
start/end pair of YearMonth values. Navigation helpers accept an optional
current month so a picker with nothing selected yet still has somewhere
to go (previous jumps to the end of the range, next to the start).
"""

from collections.abc import Iterator
from dataclasses import dataclass

from periodpick.domain.models import MonthNumber, Year
from periodpick.domain.year_month import YearMonth


@dataclass(frozen=True)
class YearMonthRange:
    """Inclusive range of months."""

    start: YearMonth
    end: YearMonth

    @property
    def available_years(self) -> list[Year]:
        """Years in the range, newest first."""
        return [Year(y) for y in range(self.end.year, self.start.year - 1, -1)]

    def available_months(self, year: int | None) -> list[MonthNumber]:
        """Months of ``year`` inside the range, newest first."""
        if year is None:
            return []
        start_month = self.start.month if year == self.start.year else 1
        end_month = self.end.month if year == self.end.year else 12
        return [MonthNumber(m) for m in range(end_month, start_month - 1, -1)]

    def can_move_previous(self, current: YearMonth | None) -> bool:
        if current is None:
            return True
        return current > self.start

    def can_move_next(self, current: YearMonth | None) -> bool:
        if current is None:
            return True
        return current < self.end

    def previous_month(self, current: YearMonth | None) -> YearMonth:
        """Step back one month, staying put at the start of the range."""
        if current is None:
            return self.end
        prev = current.previous_month()
        return prev if prev >= self.start else current

    def next_month(self, current: YearMonth | None) -> YearMonth:
        """Step forward one month, staying put at the end of the range."""
        if current is None:
            return self.start
        nxt = current.next_month()
        return nxt if nxt <= self.end else current

    def contains(self, ym: YearMonth) -> bool:
        return self.start <= ym <= self.end

    def iter_months(self) -> Iterator[YearMonth]:
        """Yield every month of the range in ascending order."""
        for offset in range(self.start.months_until(self.end) + 1):
            yield self.start.adding(offset)
