"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ascii_weather import cli
from ascii_weather.location import Location
from ascii_weather.service import LocationForecast
from ascii_weather.weather import DailyForecast, ForecastSet


class _FakeService:
    instances: list[_FakeService] = []

    def __init__(self, settings: Any, logger: Any) -> None:
        self.settings = settings
        self.city_calls: list[tuple[str, str]] = []
        self.current_calls = 0
        _FakeService.instances.append(self)

    def __enter__(self) -> _FakeService:
        return self

    def __exit__(self, *exc: Any) -> None:
        return None

    def _result(self, city: str, region: str) -> LocationForecast:
        return LocationForecast(
            location=Location(city=city, region=region, latitude="34.05", longitude="-118.24"),
            forecast=ForecastSet(
                latitude="34.05",
                longitude="-118.24",
                days=[
                    DailyForecast(
                        date_text="2024-10-13",
                        weather_code=0,
                        temperature_max=75.4,
                        temperature_min=60.2,
                    )
                ],
            ),
        )

    def for_city_state(self, city: str, state: str) -> LocationForecast:
        self.city_calls.append((city, state))
        return self._result(city, state)

    def for_current_location(self) -> LocationForecast:
        self.current_calls += 1
        return self._result("Minneapolis", "Minnesota")


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COLUMN_WIDTH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.setattr(cli, "ForecastService", _FakeService)
    _FakeService.instances = []


def test_once_with_location_prints_forecast(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["--once", "--location", "Los Angeles, CA"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert _FakeService.instances[0].city_calls == [("Los Angeles", "CA")]
    assert "Weather for Los Angeles, CA" in out
    assert "Sunday October 13" in out
    assert "High 75" in out
    assert "Low 60" in out


def test_once_without_location_uses_ip_lookup(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["--once"])

    assert exit_code == 0
    assert _FakeService.instances[0].current_calls == 1
    assert "Weather for Minneapolis, Minnesota" in capsys.readouterr().out


def test_location_without_state_is_rejected() -> None:
    assert cli.main(["--once", "--location", "Boston"]) == 2
    assert _FakeService.instances[0].city_calls == []


def test_config_error_exits_with_code_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMN_WIDTH", "0")
    assert cli.main(["--once"]) == 2
    assert _FakeService.instances == []


def test_log_file_receives_json_lines(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    log_path = tmp_path / "logs" / "viewer.jsonl"
    monkeypatch.setenv("LOG_FILE", str(log_path))
    monkeypatch.setenv("LOCATIONIQ_API_KEY", "pk.never-logged")

    assert cli.main(["--once", "--location", "Reno, NV"]) == 0

    captured = capsys.readouterr()
    assert captured.err == ""
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines
    assert all(json.loads(line)["logger"] == "ascii_weather" for line in lines)
    assert "pk.never-logged" not in log_path.read_text(encoding="utf-8")
