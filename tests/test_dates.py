"""Tests for periodpick.dates pure functions."""

from datetime import date

import pytest

from periodpick.dates import default_bounds, period_date_range, period_from_date
from periodpick.domain.models import Granularity
from periodpick.domain.period import Period


class TestPeriodDateRange:
    """Tests for period_date_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        assert period_date_range(Period.year_month(2025, 1)) == ("2025-01-01", "2025-02-01")

    def test_december_range_crosses_year(self) -> None:
        """Should handle December (crosses year boundary)."""
        assert period_date_range(Period.year_month(2025, 12)) == ("2025-12-01", "2026-01-01")

    def test_february_leap_year(self) -> None:
        """Should end February on the first of March regardless of leap years."""
        assert period_date_range(Period.year_month(2024, 2)) == ("2024-02-01", "2024-03-01")

    def test_year_range(self) -> None:
        """Should span the whole year."""
        assert period_date_range(Period.year_only(2025)) == ("2025-01-01", "2026-01-01")

    def test_unbounded_range(self) -> None:
        """Should return no dates for all time."""
        assert period_date_range(Period.unbounded()) == (None, None)

    def test_all_months_of_year(self) -> None:
        """Should produce contiguous ranges for all 12 months."""
        ranges = [period_date_range(Period.year_month(2025, m)) for m in range(1, 13)]

        assert ranges[0][0] == "2025-01-01"
        assert ranges[-1][1] == "2026-01-01"
        for (_, until), (since, _) in zip(ranges, ranges[1:]):
            assert until == since

    def test_invalid_month_raises_valueerror(self) -> None:
        """Should surface the calendar's ValueError for a month outside 1-12."""
        with pytest.raises(ValueError):
            period_date_range(Period.year_month(2025, 13))

    @pytest.mark.parametrize(
        "period",
        [
            Period.year_only(0),
            Period.year_month(0, 12),
            Period.year_month(-5, 3),
            Period.year_only(9999),
            Period.year_month(9999, 12),
            Period.year_month(10000, 1),
        ],
    )
    def test_years_outside_calendar(self, period: Period) -> None:
        """Should return no dates when the calendar cannot represent the span."""
        assert period_date_range(period) == (None, None)

    def test_calendar_edges(self) -> None:
        """Should still expand the first and last representable periods."""
        assert period_date_range(Period.year_month(1, 1)) == ("0001-01-01", "0001-02-01")
        assert period_date_range(Period.year_month(9999, 11)) == ("9999-11-01", "9999-12-01")
        assert period_date_range(Period.year_only(9998)) == ("9998-01-01", "9999-01-01")


class TestPeriodFromDate:
    """Tests for period_from_date."""

    @pytest.mark.parametrize(
        ("granularity", "expected"),
        [
            (Granularity.MONTH, Period.year_month(2025, 8)),
            (Granularity.YEAR, Period.year_only(2025)),
            (Granularity.UNBOUNDED, Period.unbounded()),
        ],
    )
    def test_truncates(self, granularity: Granularity, expected: Period) -> None:
        """Should truncate to the requested granularity."""
        assert period_from_date(date(2025, 8, 17), granularity) == expected


class TestDefaultBounds:
    """Tests for default_bounds."""

    def test_five_years_back(self) -> None:
        """Should span January five years back to the current month."""
        assert default_bounds(date(2026, 10, 19)) == (
            Period.year_month(2021, 1),
            Period.year_month(2026, 10),
        )

    def test_custom_years_back(self) -> None:
        """Should honour a custom look-back."""
        minimum, _ = default_bounds(date(2026, 10, 19), years_back=1)
        assert minimum == Period.year_month(2025, 1)
