from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from weather_config import config as config_module
from weather_config.config import ConfigStore, Configuration, Location
from weather_config.errors import LocationLookupError
from weather_config.options import describe_all

SPRINGFIELD = Location(name="Springfield, IL", latitude=39.7817, longitude=-89.6501)
PARIS = Location(name="Paris, France", latitude=48.8566, longitude=2.3522)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's hamr environment out of the tests."""
    for key in ("HAMR_WEATHER_CONFIG", "HAMR_WEATHER_ICONS", "HAMR_WEATHER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_module, "TEST_MODE", False)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[logging.Logger]:
    """Undo configure_logging calls made by entry points under test."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    root = tmp_path / "icons"
    for name in ("default", "dark", "mono"):
        (root / name).mkdir(parents=True)
    (root / "README").write_text("not an icon set")
    return root


@pytest.fixture
def fake_locate():
    """Geocoder that knows Paris and nothing else."""
    calls = []

    def locate(query: str) -> Location:
        calls.append(query)
        if query.lower().startswith("paris"):
            return PARIS
        raise LocationLookupError(query, "no results")

    locate.calls = calls
    return locate


@pytest.fixture
def options(icons_dir: Path, fake_locate):
    return describe_all(locate=fake_locate, icons_dir=icons_dir)


@pytest.fixture
def current() -> Configuration:
    return Configuration(location=SPRINGFIELD, count=3, date_format="%d/%m")


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "weather.json"


@pytest.fixture
def store(config_file: Path, current: Configuration) -> ConfigStore:
    config_file.parent.mkdir(parents=True)
    config_file.write_text(json.dumps(current.to_dict(), indent=2))
    return ConfigStore(config_file)


def read_back(path: Path) -> dict:
    return json.loads(path.read_text())
