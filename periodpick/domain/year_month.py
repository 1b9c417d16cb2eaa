"""Year-month values with wraparound arithmetic.

YearMonth is the leaf of the period calculus: an immutable (year, month)
pair ordered lexicographically. Arithmetic goes through an absolute month
index and uses floor division, so stepping backwards across January lands
on December of the previous year.
"""

from dataclasses import dataclass
from datetime import date

from periodpick.domain.models import MonthNumber, Year


@dataclass(frozen=True, order=True)
class YearMonth:
    """Immutable calendar month, ordered by (year, month)."""

    year: Year
    month: MonthNumber

    @classmethod
    def from_date(cls, d: date) -> "YearMonth":
        """Truncate a date (or datetime) to its month."""
        return cls(Year(d.year), MonthNumber(d.month))

    @classmethod
    def current(cls, today: date) -> "YearMonth":
        """Month containing ``today``.

        The caller supplies the date so results never depend on the clock.
        """
        return cls.from_date(today)

    def adding(self, months: int) -> "YearMonth":
        """Return the month ``months`` away from this one (may be negative).

        Args:
            months: Number of months to move.

        Returns:
            New YearMonth.
        """
        total = self.year * 12 + (self.month - 1) + months
        return YearMonth(Year(total // 12), MonthNumber(total % 12 + 1))

    def next_month(self) -> "YearMonth":
        return self.adding(1)

    def previous_month(self) -> "YearMonth":
        return self.adding(-1)

    def months_until(self, other: "YearMonth") -> int:
        """Signed number of months from this month to ``other``."""
        return (other.year - self.year) * 12 + (other.month - self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
