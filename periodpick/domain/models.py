"""Domain type definitions for periodpick.

These types give names to the small vocabulary of the period calculus:
- Year: Calendar year (any integer, no range check)
- MonthNumber: Month of the year, 1-12 by convention (never validated)
- Granularity: Which calendar unit a period resolves to
- Ordering: Result of comparing two periods, including "incomparable"
- ComparisonPolicy: Which comparison rule to apply
"""

from enum import Enum
from typing import NewType

Year = NewType("Year", int)

# Months are 1-12; out-of-range values are the caller's problem
MonthNumber = NewType("MonthNumber", int)


class Granularity(Enum):
    """Calendar unit a period resolves to."""

    UNBOUNDED = "unbounded"
    YEAR = "year"
    MONTH = "month"


class Ordering(Enum):
    """Outcome of a period comparison.

    INCOMPARABLE is a real third state, not a synonym for False: callers
    must branch on it explicitly.
    """

    ASCENDING = -1
    SAME = 0
    DESCENDING = 1
    INCOMPARABLE = None


class ComparisonPolicy(Enum):
    """Rule used when comparing periods of possibly different granularity."""

    # Years decide first; a year-only side matches any month of that year
    YEAR_FIRST = "year_first"
    # Only periods of the same (bounded) granularity are comparable
    SAME_GRANULARITY = "same_granularity"
