from __future__ import annotations

import io
import json
import urllib.error
import urllib.request

import pytest

from weather_config import geocode
from weather_config.config import Location
from weather_config.errors import LocationLookupError


def fake_urlopen(body, requests):
    def urlopen(request, timeout=None):
        requests.append((request, timeout))
        if isinstance(body, Exception):
            raise body
        return io.BytesIO(body.encode())

    return urlopen


@pytest.fixture
def requests():
    return []


def test_locate_first_result(monkeypatch, requests) -> None:
    body = json.dumps(
        [
            {"display_name": "Paris, France", "lat": "48.8566", "lon": "2.3522"},
            {"display_name": "Paris, Texas", "lat": "33.66", "lon": "-95.55"},
        ]
    )
    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen(body, requests))

    assert geocode.locate("Paris") == Location("Paris, France", 48.8566, 2.3522)

    request, timeout = requests[0]
    assert request.full_url.startswith(geocode.SEARCH_URL)
    assert "q=Paris" in request.full_url
    assert request.get_header("User-agent") == geocode.USER_AGENT
    assert timeout == geocode.TIMEOUT


def test_locate_no_results(monkeypatch, requests) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen("[]", requests))
    with pytest.raises(LocationLookupError, match="no results"):
        geocode.locate("Nowhereville")


def test_locate_network_error(monkeypatch, requests) -> None:
    error = urllib.error.URLError("connection refused")
    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen(error, requests))
    with pytest.raises(LocationLookupError) as excinfo:
        geocode.locate("Paris")
    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize(
    "body",
    ["not json", '{"error": "bad"}', '[{"display_name": "Paris"}]', '[{"display_name": "X", "lat": "n/a", "lon": "1"}]'],
)
def test_locate_bad_response(monkeypatch, requests, body) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen(body, requests))
    with pytest.raises(LocationLookupError):
        geocode.locate("Paris")


def test_locate_empty_query_skips_request(monkeypatch, requests) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen("[]", requests))
    with pytest.raises(LocationLookupError):
        geocode.locate("  ")
    assert requests == []
