"""
Weather plugin configuration record and its JSON persistence.
Reads/writes config from ~/.config/hamr/weather.json

The Configuration is immutable. Edits build a new record with
dataclasses.replace; the live one is owned by a ConfigStore for the
lifetime of a single plugin invocation.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from .errors import DeserializationError, PersistenceError

logger = logging.getLogger(__name__)

TEST_MODE = os.environ.get("HAMR_TEST_MODE") == "1"
PACKAGE_DIR = Path(__file__).resolve().parent

SERVICES = ("forecast.io", "wunderground")
UNITS = ("metric", "imperial")
TIME_FORMATS = ("12-hour", "24-hour")


def config_path() -> Path:
    """Config file location, honouring HAMR_WEATHER_CONFIG and XDG_CONFIG_HOME."""
    override = os.environ.get("HAMR_WEATHER_CONFIG")
    if override:
        return Path(override).expanduser()
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "hamr" / "weather.json"


def icons_dir() -> Path:
    """Root directory holding one subdirectory per icon set."""
    override = os.environ.get("HAMR_WEATHER_ICONS")
    if override:
        return Path(override).expanduser()
    return PACKAGE_DIR / "icons"


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Configuration:
    """Everything the weather plugin persists."""

    service: str = "forecast.io"
    units: str = "metric"
    location: Location | None = None
    icon_set: str = "default"
    time_format: str = "12-hour"
    date_format: str = "%a %b %d"
    count: int = 5
    show_hourly: bool = True
    forecast_io_key: str = ""
    wunderground_key: str = ""

    def to_dict(self) -> dict:
        return {
            "service": self.service,
            "units": self.units,
            "location": self.location.to_dict() if self.location else None,
            "iconSet": self.icon_set,
            "timeFormat": self.time_format,
            "dateFormat": self.date_format,
            "count": self.count,
            "showHourly": self.show_hourly,
            "forecastIoKey": self.forecast_io_key,
            "wundergroundKey": self.wunderground_key,
        }

    @classmethod
    def from_dict(cls, data, base: Configuration | None = None) -> Configuration:
        """Build a Configuration from decoded JSON.

        Keys missing from ``data`` keep their value from ``base`` (defaults
        when no base is given). Values of the wrong type, unknown enum values
        and partially filled locations raise DeserializationError.
        """
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        if base is None:
            base = cls()
        return replace(
            base,
            service=_enum_field(data, "service", SERVICES, base.service),
            units=_enum_field(data, "units", UNITS, base.units),
            location=_location_field(data, base.location),
            icon_set=_string_field(data, "iconSet", base.icon_set),
            time_format=_enum_field(
                data, "timeFormat", TIME_FORMATS, base.time_format
            ),
            date_format=_string_field(data, "dateFormat", base.date_format),
            count=_int_field(data, "count", base.count),
            show_hourly=_bool_field(data, "showHourly", base.show_hourly),
            forecast_io_key=_string_field(
                data, "forecastIoKey", base.forecast_io_key
            ),
            wunderground_key=_string_field(
                data, "wundergroundKey", base.wunderground_key
            ),
        )


def _string_field(data: dict, key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise DeserializationError(f"{key} must be a string, got {value!r}")
    return value


def _enum_field(data: dict, key: str, allowed: tuple[str, ...], default: str) -> str:
    value = _string_field(data, key, default)
    if value not in allowed:
        raise DeserializationError(
            f"{key} must be one of {', '.join(allowed)}, got {value!r}"
        )
    return value


def _int_field(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"{key} must be an integer, got {value!r}")
    return value


def _bool_field(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise DeserializationError(f"{key} must be true or false, got {value!r}")
    return value


def _coordinate(raw: dict, key: str) -> float:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializationError(f"location.{key} must be a number, got {value!r}")
    return float(value)


def _location_field(data: dict, default: Location | None) -> Location | None:
    if "location" not in data:
        return default
    raw = data["location"]
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DeserializationError(f"location must be an object, got {raw!r}")
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise DeserializationError(f"location.name must be a string, got {name!r}")
    return Location(
        name=name,
        latitude=_coordinate(raw, "latitude"),
        longitude=_coordinate(raw, "longitude"),
    )


def dump_payload(config: Configuration) -> str:
    """Serialize a snapshot for a round trip through the host."""
    return json.dumps(config.to_dict(), separators=(",", ":"))


def load_payload(payload: str | bytes, base: Configuration) -> Configuration:
    """Decode a payload produced by dump_payload."""
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
        raise DeserializationError(f"Malformed payload: {exc}") from exc
    return Configuration.from_dict(data, base)


def load_config(path: Path) -> Configuration:
    """Load the config file, falling back to defaults if missing or unreadable."""
    if TEST_MODE:
        return Configuration()
    if not path.exists():
        return Configuration()
    try:
        with open(path) as f:
            data = json.load(f)
        return Configuration.from_dict(data)
    except (OSError, json.JSONDecodeError, DeserializationError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return Configuration()


def save_config(config: Configuration, path: Path) -> None:
    if TEST_MODE:
        logger.debug("Test mode, not writing %s", path)
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as exc:
        raise PersistenceError(str(path), exc.strerror or str(exc)) from exc
    logger.info("Saved config to %s", path)


class ConfigStore:
    """Owns the live configuration for one plugin invocation.

    The configuration is loaded once when the store is created and replaced
    wholesale by the mutator when the user commits an edit.
    """

    def __init__(
        self, path: Path | None = None, config: Configuration | None = None
    ) -> None:
        self.path = Path(path) if path is not None else config_path()
        self.config = config if config is not None else load_config(self.path)

    def replace(self, config: Configuration) -> None:
        self.config = config

    def save(self) -> None:
        save_config(self.config, self.path)
