"""Domain models and types for periodpick.

This package contains the functional core:
- Pure functions with no side effects
- Immutable values; every operation returns a new instance
- No I/O operations
- Easy to test
"""

from periodpick.domain.models import ComparisonPolicy, Granularity, MonthNumber, Ordering, Year
from periodpick.domain.month_range import YearMonthRange
from periodpick.domain.options import available_months, available_years
from periodpick.domain.period import Period, compare
from periodpick.domain.range_bound import RangeBoundPeriod
from periodpick.domain.year_month import YearMonth

__all__ = [
    # Types
    "ComparisonPolicy",
    "Granularity",
    "MonthNumber",
    "Ordering",
    "Year",
    # Values
    "Period",
    "RangeBoundPeriod",
    "YearMonth",
    "YearMonthRange",
    # Functions
    "available_months",
    "available_years",
    "compare",
]
