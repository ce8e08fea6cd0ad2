from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from conftest import read_back
from weather_config.cli import main


@pytest.fixture
def runner(monkeypatch, icons_dir) -> CliRunner:
    monkeypatch.setenv("HAMR_WEATHER_ICONS", str(icons_dir))
    return CliRunner()


def test_list_browse(runner, store, config_file) -> None:
    result = runner.invoke(main, ["--config", str(config_file), "list"])
    assert result.exit_code == 0, result.output
    assert "Units: metric" in result.output
    assert "[x] ShowHourly: Yes" in result.output


def test_list_icon_choices_json(runner, store, config_file) -> None:
    result = runner.invoke(main, ["-c", str(config_file), "list", "--json", "Icons"])
    assert result.exit_code == 0, result.output
    results = json.loads(result.output)
    assert [r["name"] for r in results] == ["dark", "default", "mono"]
    assert results[1]["icon"] == "check_box"


def test_list_invalid_integer_fails(runner, store, config_file) -> None:
    result = runner.invoke(main, ["-c", str(config_file), "list", "Count", "abc"])
    assert result.exit_code == 1
    assert "Invalid value for Count" in result.output


def test_apply_then_show(runner, store, config_file) -> None:
    listed = runner.invoke(main, ["-c", str(config_file), "list", "--json", "Count", "14"])
    payload = json.loads(listed.output)[0]["id"].split(":", 1)[1]

    applied = runner.invoke(main, ["-c", str(config_file), "apply", payload])
    assert applied.exit_code == 0, applied.output
    assert applied.output.strip() == "Updated config"
    assert read_back(config_file)["count"] == 14

    shown = runner.invoke(main, ["-c", str(config_file), "show"])
    assert json.loads(shown.output)["count"] == 14


def test_apply_bad_payload_fails(runner, store, config_file) -> None:
    result = runner.invoke(main, ["-c", str(config_file), "apply", "{oops"])
    assert result.exit_code == 1
    assert "Malformed payload" in result.output
