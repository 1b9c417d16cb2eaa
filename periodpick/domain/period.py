"""Periods at three granularities: unbounded, year-only and year+month.

This module contains the core of the period calculus:
- Construction from components or calendar dates
- Stepping with year-boundary wraparound
- A single comparator with two named policies

A Period is a tagged value. The tag (its Granularity) is derived from which
components are present, so a month without a year collapses to unbounded.
"""

from dataclasses import dataclass
from datetime import date

from periodpick.domain.models import ComparisonPolicy, Granularity, MonthNumber, Ordering, Year
from periodpick.domain.year_month import YearMonth


@dataclass(frozen=True)
class Period:
    """Immutable period value.

    Use the named constructors rather than the raw fields:

        Period.unbounded()          -> "all"
        Period.year_only(2020)      -> "2020"
        Period.year_month(2020, 6)  -> "2020-6"
    """

    year: Year | None = None
    month: MonthNumber | None = None

    def __post_init__(self) -> None:
        if self.year is None and self.month is not None:
            object.__setattr__(self, "month", None)

    @classmethod
    def unbounded(cls) -> "Period":
        return cls()

    @classmethod
    def year_only(cls, year: int) -> "Period":
        return cls(Year(year))

    @classmethod
    def year_month(cls, year: int, month: int) -> "Period":
        return cls(Year(year), MonthNumber(month))

    @classmethod
    def of(cls, year: int | None, month: int | None) -> "Period":
        """Build a period from optional components.

        Both present gives year+month, year alone gives year-only and no
        year gives unbounded (a lone month is dropped).
        """
        if year is None:
            return cls.unbounded()
        if month is None:
            return cls.year_only(year)
        return cls.year_month(year, month)

    @classmethod
    def year_of(cls, d: date) -> "Period":
        """Truncate a date to its year."""
        return cls.year_only(d.year)

    @classmethod
    def year_month_of(cls, d: date) -> "Period":
        """Truncate a date to its month."""
        return cls.year_month(d.year, d.month)

    @classmethod
    def from_year_month(cls, ym: YearMonth) -> "Period":
        return cls.year_month(ym.year, ym.month)

    @property
    def granularity(self) -> Granularity:
        if self.year is None:
            return Granularity.UNBOUNDED
        if self.month is None:
            return Granularity.YEAR
        return Granularity.MONTH

    @property
    def year_component(self) -> Year | None:
        return self.year

    @property
    def month_component(self) -> MonthNumber | None:
        return self.month

    @property
    def description(self) -> str:
        """Debug string: "all", "<year>" or "<year>-<month>"."""
        match self.granularity:
            case Granularity.UNBOUNDED:
                return "all"
            case Granularity.YEAR:
                return f"{self.year}"
            case Granularity.MONTH:
                return f"{self.year}-{self.month}"

    def to_year_month(self) -> YearMonth | None:
        """YearMonth for a year+month period, None for coarser ones."""
        if self.year is None or self.month is None:
            return None
        return YearMonth(self.year, self.month)

    def next(self) -> "Period":
        return self._step(1)

    def previous(self) -> "Period":
        return self._step(-1)

    def _step(self, delta: int) -> "Period":
        match self.granularity:
            case Granularity.UNBOUNDED:
                # "all time" has no neighbours
                return self
            case Granularity.YEAR:
                assert self.year is not None
                return Period.year_only(self.year + delta)
            case Granularity.MONTH:
                ym = self.to_year_month()
                assert ym is not None
                return Period.from_year_month(ym.adding(delta))

    def compare(self, other: "Period", policy: ComparisonPolicy = ComparisonPolicy.YEAR_FIRST) -> Ordering:
        return compare(self, other, policy)

    def is_before(self, other: "Period", policy: ComparisonPolicy = ComparisonPolicy.YEAR_FIRST) -> bool:
        return compare(self, other, policy) is Ordering.ASCENDING

    def is_after(self, other: "Period", policy: ComparisonPolicy = ComparisonPolicy.YEAR_FIRST) -> bool:
        return compare(self, other, policy) is Ordering.DESCENDING

    def __str__(self) -> str:
        return self.description


def compare(left: Period, right: Period, policy: ComparisonPolicy = ComparisonPolicy.YEAR_FIRST) -> Ordering:
    """Compare two periods under the given policy.

    YEAR_FIRST (default):
        Unbounded on either side is incomparable. Different years decide the
        order. With equal years, months decide only when both sides have
        one; otherwise the periods are the same. This is the rule bound
        checks use, because it lets a year-only selection be checked
        against year+month bounds.

    SAME_GRANULARITY:
        Periods of different granularity, or two unbounded periods, are
        incomparable. Otherwise (year, month) is compared lexicographically.

    Args:
        left: Period on the left-hand side.
        right: Period on the right-hand side.
        policy: Comparison rule.

    Returns:
        Ordering of left relative to right.
    """
    if left.year is None or right.year is None:
        return Ordering.INCOMPARABLE

    if policy is ComparisonPolicy.SAME_GRANULARITY:
        if left.granularity is not right.granularity:
            return Ordering.INCOMPARABLE
        if left.month is None or right.month is None:
            return _order((left.year,), (right.year,))
        return _order((left.year, left.month), (right.year, right.month))

    if left.year != right.year:
        return _order((left.year,), (right.year,))

    if left.month is not None and right.month is not None:
        return _order((left.month,), (right.month,))

    return Ordering.SAME


def _order(left: tuple[int, ...], right: tuple[int, ...]) -> Ordering:
    if left < right:
        return Ordering.ASCENDING
    if left > right:
        return Ordering.DESCENDING
    return Ordering.SAME
