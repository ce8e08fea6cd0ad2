"""Configuration editor for the hamr weather plugin."""

from .candidates import Candidate, list_candidates, split_query
from .config import ConfigStore, Configuration, Location
from .errors import (
    DeserializationError,
    FilesystemError,
    LocationLookupError,
    PersistenceError,
    ValidationError,
    WeatherConfigError,
)
from .mutator import apply
from .options import OptionDescriptor, OptionKind, describe_all

__all__ = [
    "Candidate",
    "ConfigStore",
    "Configuration",
    "DeserializationError",
    "FilesystemError",
    "Location",
    "LocationLookupError",
    "OptionDescriptor",
    "OptionKind",
    "PersistenceError",
    "ValidationError",
    "WeatherConfigError",
    "apply",
    "describe_all",
    "list_candidates",
    "split_query",
]
