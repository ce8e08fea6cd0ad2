"""Error types for the weather plugin configuration editor.

Exception Hierarchy:
    WeatherConfigError (base for all editor errors)
    ├── ValidationError (malformed integer or enum input)
    ├── LocationLookupError (geocoder failure or no results)
    ├── FilesystemError (icon directory listing failure)
    ├── DeserializationError (corrupt commit payload or config file)
    └── PersistenceError (config file write failure)
"""

from __future__ import annotations

STATUS_UPDATED = "Updated config"
STATUS_FAILED = "Error updating config"


class WeatherConfigError(Exception):
    """Base exception for all configuration editor errors.

    The hamr handler and the CLI catch this single type and render its
    message to the user.
    """


class ValidationError(WeatherConfigError):
    """User-entered text is not a valid value for the option."""

    def __init__(self, option: str, value: str, reason: str) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for {option}: {value!r} ({reason})")


class LocationLookupError(WeatherConfigError):
    """The geocoder failed or found nothing for a query."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        super().__init__(f"Could not locate {query!r}: {reason}")


class FilesystemError(WeatherConfigError):
    """A directory could not be listed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot list {path}: {reason}")


class DeserializationError(WeatherConfigError):
    """A payload or config file is not a valid configuration."""


class PersistenceError(WeatherConfigError):
    """The configuration could not be written.

    The live configuration has already been replaced when this is raised.
    """

    status = STATUS_FAILED

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"{STATUS_FAILED}: cannot write {path} ({reason})")
