"""
Geocoder - resolves a free-text place into a Location using the
OpenStreetMap Nominatim search API
"""

from __future__ import annotations

import json
import logging
import urllib.parse
import urllib.request

from .config import Location
from .errors import LocationLookupError

logger = logging.getLogger(__name__)

SEARCH_URL = "https://nominatim.openstreetmap.org/search"
USER_AGENT = "hamr-weather/0.1"
TIMEOUT = 5


def locate(query: str) -> Location:
    """Return the best match for query, or raise LocationLookupError."""
    if not query.strip():
        raise LocationLookupError(query, "empty query")

    params = urllib.parse.urlencode({"q": query, "format": "json", "limit": 1})
    request = urllib.request.Request(
        f"{SEARCH_URL}?{params}", headers={"User-Agent": USER_AGENT}
    )
    try:
        with urllib.request.urlopen(request, timeout=TIMEOUT) as response:
            data = json.loads(response.read().decode())
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Geocode request for %r failed: %s", query, exc)
        raise LocationLookupError(query, str(exc)) from exc

    if not isinstance(data, list) or not data:
        raise LocationLookupError(query, "no results")

    place = data[0]
    try:
        location = Location(
            name=place["display_name"],
            latitude=float(place["lat"]),
            longitude=float(place["lon"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise LocationLookupError(query, f"unexpected response: {exc}") from exc

    logger.debug("Located %r at %s", query, location)
    return location
