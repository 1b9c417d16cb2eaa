"""Configuration file management for periodpick."""

import os
import re
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from periodpick.domain.period import Period

_PERIOD_PATTERN = re.compile(r"^(?P<year>-?\d+)(?:-(?P<month>\d{1,2}))?$")


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "periodpick" / "config.toml"


def parse_period(text: str) -> Period:
    """Parse a period string as written by Period.description.

    Accepts "all", "2025", "2025-6" and "2025-06".

    Args:
        text: Period string.

    Returns:
        Parsed Period.

    Raises:
        ValueError: If the text is not a period or the month is not 1-12.
    """
    cleaned = text.strip()
    if cleaned.lower() == "all":
        return Period.unbounded()

    match = _PERIOD_PATTERN.match(cleaned)
    if not match:
        raise ValueError(f"Invalid period {text!r}: expected 'all', 'YYYY' or 'YYYY-MM'")

    year = int(match.group("year"))
    month_text = match.group("month")
    if month_text is None:
        return Period.year_only(year)

    month = int(month_text)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid period {text!r}: month {month} is not between 1 and 12")
    return Period.year_month(year, month)


def create_default_config(config_path: Path | None = None, bounds: tuple[Period, Period] | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        bounds: Optional (minimum, maximum) to record. If None, the bounds
            table is left empty and commands fall back to their defaults.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {"bounds": {}}
    if bounds is not None:
        minimum, maximum = bounds
        default_config["bounds"] = {
            "minimum": minimum.description,
            "maximum": maximum.description,
        }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_bounds(config_path: Path | None = None) -> tuple[Period, Period] | None:
    """Get the configured (minimum, maximum) bounds.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Tuple of parsed bounds, or None if the file or either bound is missing.

    Raises:
        ValueError: If a configured bound is not a valid period.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return None

    bounds = load_config(config_path).get("bounds", {})
    minimum = bounds.get("minimum")
    maximum = bounds.get("maximum")
    if not isinstance(minimum, str) or not isinstance(maximum, str):
        return None

    return parse_period(minimum), parse_period(maximum)


def get_selected(config_path: Path | None = None) -> Period | None:
    """Get the configured initial selection, if any.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Parsed selection or None if not configured.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return None

    selected = load_config(config_path).get("bounds", {}).get("selected")
    if not isinstance(selected, str):
        return None
    return parse_period(selected)


def set_bounds(minimum: Period, maximum: Period, config_path: Path | None = None) -> None:
    """Record bounds in the config file, keeping any other settings.

    Args:
        minimum: Lower bound.
        maximum: Upper bound.
        config_path: Path to config file. If None, uses default location.
    """
    config = load_config(config_path)

    bounds = config.get("bounds", {})
    bounds["minimum"] = minimum.description
    bounds["maximum"] = maximum.description

    config["bounds"] = bounds
    save_config(config, config_path)
