"""Tests for periodpick.config."""

import stat
from pathlib import Path

import pytest

from periodpick.config import (
    create_default_config,
    get_bounds,
    get_config_path,
    get_selected,
    load_config,
    parse_period,
    save_config,
    set_bounds,
)
from periodpick.domain.period import Period


class TestParsePeriod:
    """Tests for parse_period."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("all", Period.unbounded()),
            ("ALL", Period.unbounded()),
            ("2025", Period.year_only(2025)),
            ("2025-6", Period.year_month(2025, 6)),
            ("2025-06", Period.year_month(2025, 6)),
            (" 2025-12 ", Period.year_month(2025, 12)),
        ],
    )
    def test_valid(self, text: str, expected: Period) -> None:
        """Should parse every form Period.description produces."""
        assert parse_period(text) == expected

    def test_inverse_of_description(self) -> None:
        """Should read back what description writes."""
        for period in (Period.unbounded(), Period.year_only(1999), Period.year_month(2030, 11)):
            assert parse_period(period.description) == period

    @pytest.mark.parametrize("text", ["", "soon", "2025-", "2025/06", "06-2025", "2025-6-1"])
    def test_invalid_format(self, text: str) -> None:
        """Should reject text that is not a period."""
        with pytest.raises(ValueError, match="Invalid period"):
            parse_period(text)

    @pytest.mark.parametrize("text", ["2025-0", "2025-13"])
    def test_month_out_of_range(self, text: str) -> None:
        """Should reject months outside 1-12."""
        with pytest.raises(ValueError, match="not between 1 and 12"):
            parse_period(text)


class TestConfigFile:
    """Tests for reading and writing the config file."""

    def test_config_path_follows_xdg(self, isolated_config_home: Path) -> None:
        """Should place config under XDG_CONFIG_HOME."""
        assert get_config_path() == isolated_config_home / "periodpick" / "config.toml"

    def test_create_default_config_with_bounds(self) -> None:
        """Should write bounds and restrict permissions."""
        bounds = (Period.year_month(2023, 5), Period.year_month(2026, 10))
        create_default_config(bounds=bounds)

        path = get_config_path()
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert load_config() == {"bounds": {"minimum": "2023-5", "maximum": "2026-10"}}
        assert get_bounds() == bounds

    def test_create_default_config_without_bounds(self) -> None:
        """Should write an empty bounds table."""
        create_default_config()
        assert load_config() == {"bounds": {}}
        assert get_bounds() is None

    def test_missing_file(self) -> None:
        """Should report no bounds or selection without a config file."""
        assert get_bounds() is None
        assert get_selected() is None

    def test_load_missing_file_raises(self) -> None:
        """Should raise FileNotFoundError when loading a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config()

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Should honour an explicit config path."""
        path = tmp_path / "elsewhere" / "picker.toml"
        create_default_config(path, (Period.year_only(2020), Period.year_only(2021)))
        assert get_bounds(path) == (Period.year_only(2020), Period.year_only(2021))

    def test_selected(self) -> None:
        """Should parse an optional selection from the bounds table."""
        create_default_config()
        save_config({"bounds": {"selected": "2025"}})
        assert get_selected() == Period.year_only(2025)

    def test_invalid_bound_raises(self) -> None:
        """Should surface malformed bounds as ValueError."""
        create_default_config()
        save_config({"bounds": {"minimum": "whenever", "maximum": "2025"}})
        with pytest.raises(ValueError):
            get_bounds()

    def test_set_bounds_keeps_other_settings(self) -> None:
        """Should update bounds without dropping the selection."""
        create_default_config()
        save_config({"bounds": {"selected": "2024-2"}})

        set_bounds(Period.year_month(2020, 1), Period.year_month(2025, 12))

        assert get_selected() == Period.year_month(2024, 2)
        assert get_bounds() == (Period.year_month(2020, 1), Period.year_month(2025, 12))
