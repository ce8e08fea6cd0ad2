"""
Option registry - the ordered, statically declared list of editable settings.

Each descriptor carries a getter and a setter scoped to its one field plus
whatever source its kind draws values from (a fixed list of choices, a
directory scan, or a location lookup).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

from . import assets, geocode
from .config import (
    SERVICES,
    TIME_FORMATS,
    UNITS,
    Configuration,
    Location,
    icons_dir as default_icons_dir,
)
from .errors import ValidationError


class OptionKind(str, Enum):
    ENUM = "enum"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    LOCATION = "location"
    DIRECTORY = "directory"


KIND_ICONS = {
    OptionKind.ENUM: "arrow_drop_down",
    OptionKind.BOOLEAN: "toggle_on",
    OptionKind.INTEGER: "123",
    OptionKind.STRING: "text_fields",
    OptionKind.LOCATION: "location_on",
    OptionKind.DIRECTORY: "folder",
}


def format_value(value) -> str:
    """Format a value for display."""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, Location):
        return value.name
    if value is None:
        return "(not set)"
    if value == "":
        return "(empty)"
    return str(value)


@dataclass(frozen=True)
class OptionDescriptor:
    name: str
    description: str
    kind: OptionKind
    get: Callable[[Configuration], Any]
    set: Callable[[Configuration, Any], Configuration]
    choices: tuple[str, ...] = ()
    list_choices: Callable[[], list[str]] | None = None
    lookup: Callable[[str], Location] | None = None

    def current(self, config: Configuration) -> str:
        return format_value(self.get(config))

    def with_value(self, config: Configuration, value) -> Configuration:
        """Snapshot of config with this option set to value."""
        if self.kind is OptionKind.ENUM and value not in self.choices:
            raise ValidationError(
                self.name, str(value), f"expected one of {', '.join(self.choices)}"
            )
        return self.set(config, value)


def describe_all(
    locate: Callable[[str], Location] = geocode.locate,
    list_subdirectories: Callable[[str | Path], list[str]] = assets.list_subdirectories,
    icons_dir: Path | None = None,
) -> tuple[OptionDescriptor, ...]:
    """All configurable options, in display order.

    The collaborators default to the real geocoder and filesystem and are
    only called when a value is being entered.
    """

    def list_icon_sets() -> list[str]:
        return list_subdirectories(icons_dir or default_icons_dir())

    return (
        OptionDescriptor(
            name="Service",
            description="Service to use for forecasts",
            kind=OptionKind.ENUM,
            get=lambda c: c.service,
            set=lambda c, v: replace(c, service=v),
            choices=SERVICES,
        ),
        OptionDescriptor(
            name="Units",
            description="Units for temperatures and speeds",
            kind=OptionKind.ENUM,
            get=lambda c: c.units,
            set=lambda c, v: replace(c, units=v),
            choices=UNITS,
        ),
        OptionDescriptor(
            name="Location",
            description="Default forecast location",
            kind=OptionKind.LOCATION,
            get=lambda c: c.location,
            set=lambda c, v: replace(c, location=v),
            lookup=locate,
        ),
        OptionDescriptor(
            name="Icons",
            description="Icon theme",
            kind=OptionKind.DIRECTORY,
            get=lambda c: c.icon_set,
            set=lambda c, v: replace(c, icon_set=v),
            list_choices=list_icon_sets,
        ),
        OptionDescriptor(
            name="TimeFormat",
            description="Clock style for sunrise, sunset and hourly times",
            kind=OptionKind.ENUM,
            get=lambda c: c.time_format,
            set=lambda c, v: replace(c, time_format=v),
            choices=TIME_FORMATS,
        ),
        OptionDescriptor(
            name="DateFormat",
            description="strftime pattern for forecast dates",
            kind=OptionKind.STRING,
            get=lambda c: c.date_format,
            set=lambda c, v: replace(c, date_format=v),
        ),
        OptionDescriptor(
            name="Count",
            description="Number of forecast days to show",
            kind=OptionKind.INTEGER,
            get=lambda c: c.count,
            set=lambda c, v: replace(c, count=v),
        ),
        OptionDescriptor(
            name="ShowHourly",
            description="Show an hourly forecast for today",
            kind=OptionKind.BOOLEAN,
            get=lambda c: c.show_hourly,
            set=lambda c, v: replace(c, show_hourly=v),
        ),
        OptionDescriptor(
            name="ForecastIoKey",
            description="Your API key for Forecast.io",
            kind=OptionKind.STRING,
            get=lambda c: c.forecast_io_key,
            set=lambda c, v: replace(c, forecast_io_key=v),
        ),
        OptionDescriptor(
            name="WundergroundKey",
            description="Your API key for Weather Underground",
            kind=OptionKind.STRING,
            get=lambda c: c.wunderground_key,
            set=lambda c, v: replace(c, wunderground_key=v),
        ),
    )


def find_option(
    options: Sequence[OptionDescriptor], name: str
) -> OptionDescriptor | None:
    """Look up an option by name, ignoring case."""
    wanted = name.lower()
    for option in options:
        if option.name.lower() == wanted:
            return option
    return None
