"""
Candidate generator - turns the current configuration and a query typed into
the launcher into a ranked list of selectable candidates.

Query forms:
- ""                 browse every option
- "Un"               browse options whose name fuzzy-matches "Un"
- "Units"            show the current value and prompt for a new one
- "Units imp"        value choices filtered by "imp"

Candidates that carry a snapshot commit it when selected. Candidates with
only an autocomplete drill down into value entry for their option.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from .config import Configuration, dump_payload
from .errors import ValidationError
from .fuzzy import matches, rank
from .options import (
    KIND_ICONS,
    OptionDescriptor,
    OptionKind,
    describe_all,
    find_option,
    format_value,
)

logger = logging.getLogger(__name__)

LOCATION_PROMPT = "Enter a new city/state or ZIP"
# ASCII digits with an optional sign
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Candidate:
    title: str
    option: str
    kind: OptionKind
    subtitle: str = ""
    autocomplete: str | None = None
    snapshot: Configuration | None = None
    checked: bool | None = None

    @property
    def payload(self) -> str | None:
        if self.snapshot is None:
            return None
        return dump_payload(self.snapshot)

    def to_result(self) -> dict:
        """Format as a hamr result."""
        if self.checked is None:
            icon = KIND_ICONS.get(self.kind, "settings")
        else:
            icon = "check_box" if self.checked else "check_box_outline_blank"

        result = {
            "name": self.title,
            "description": self.subtitle,
            "icon": icon,
        }
        if self.snapshot is not None:
            result["id"] = f"apply:{self.payload}"
            result["verb"] = "Toggle" if self.kind is OptionKind.BOOLEAN else "Apply"
        elif self.autocomplete:
            result["id"] = f"open:{self.option}"
            result["verb"] = "Edit"
        else:
            result["id"] = f"info:{self.option}"
        return result


def split_query(query: str) -> tuple[str, str]:
    """Split a query into (option name, partial value)."""
    parts = query.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def _summary(option: OptionDescriptor, current: Configuration) -> Candidate:
    if option.kind is OptionKind.BOOLEAN:
        return _toggle(option, current)
    return Candidate(
        title=f"{option.name}: {option.current(current)}",
        subtitle=option.description,
        option=option.name,
        kind=option.kind,
        autocomplete=f"{option.name} ",
    )


def _prompt(
    option: OptionDescriptor,
    current: Configuration,
    suffix: str = "",
    subtitle: str = "",
) -> Candidate:
    return Candidate(
        title=f"{option.name}: {option.current(current)}{suffix}",
        subtitle=subtitle or option.description,
        option=option.name,
        kind=option.kind,
    )


def _toggle(
    option: OptionDescriptor, current: Configuration, note: bool = False
) -> Candidate:
    value = option.get(current)
    title = f"{option.name}: {format_value(value)}"
    if note:
        title += " (press Enter to toggle)"
    return Candidate(
        title=title,
        subtitle=option.description,
        option=option.name,
        kind=option.kind,
        autocomplete=f"{option.name} ",
        snapshot=option.with_value(current, not value),
        checked=value,
    )


def _choice(option: OptionDescriptor, current: Configuration, value: str) -> Candidate:
    return Candidate(
        title=value,
        subtitle=option.description,
        option=option.name,
        kind=option.kind,
        snapshot=option.with_value(current, value),
        checked=option.get(current) == value,
    )


def _enum_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    candidates = []
    if not value:
        candidates.append(_prompt(option, current))
    candidates.extend(
        _choice(option, current, choice)
        for choice in option.choices
        if matches(choice, value)
    )
    return candidates


def _boolean_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    return [_toggle(option, current, note=True)]


def _integer_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    if not value:
        return [_prompt(option, current, " (type a new value to change)")]
    if not INTEGER_RE.fullmatch(value):
        raise ValidationError(option.name, value, "not an integer")
    number = int(value)
    return [
        Candidate(
            title=f"{option.name}: {number}",
            subtitle=option.description,
            option=option.name,
            kind=option.kind,
            snapshot=option.with_value(current, number),
        )
    ]


def _string_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    if not value:
        return [_prompt(option, current, " (type a new value to change)")]
    return [
        Candidate(
            title=f"{option.name}: {value}",
            subtitle=option.description,
            option=option.name,
            kind=option.kind,
            snapshot=option.with_value(current, value),
        )
    ]


def _location_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    if not value:
        return [_prompt(option, current, subtitle=LOCATION_PROMPT)]
    location = option.lookup(value)
    return [
        Candidate(
            title=location.name,
            subtitle=f"({location.latitude}, {location.longitude})",
            option=option.name,
            kind=option.kind,
            snapshot=option.with_value(current, location),
        )
    ]


def _directory_candidates(
    option: OptionDescriptor, current: Configuration, value: str
) -> list[Candidate]:
    return [
        _choice(option, current, name)
        for name in option.list_choices()
        if matches(name, value)
    ]


VALUE_ENTRY: dict[
    OptionKind,
    Callable[[OptionDescriptor, Configuration, str], list[Candidate]],
] = {
    OptionKind.ENUM: _enum_candidates,
    OptionKind.BOOLEAN: _boolean_candidates,
    OptionKind.INTEGER: _integer_candidates,
    OptionKind.STRING: _string_candidates,
    OptionKind.LOCATION: _location_candidates,
    OptionKind.DIRECTORY: _directory_candidates,
}


def list_candidates(
    current: Configuration,
    query: str,
    options: Sequence[OptionDescriptor] | None = None,
) -> list[Candidate]:
    """Candidates for query, most relevant first.

    Raises ValidationError, LocationLookupError or FilesystemError when the
    value being entered cannot be turned into candidates; no partial list is
    returned in that case.
    """
    if options is None:
        options = describe_all()

    name, value = split_query(query)
    option = find_option(options, name) if name else None

    if option is None:
        candidates = [_summary(o, current) for o in options if matches(o.name, name)]
    else:
        logger.debug("Value entry for %s with %r", option.name, value)
        candidates = VALUE_ENTRY[option.kind](option, current, value)

    return rank(candidates, query, key=lambda c: c.title)
