"""Tests for lookup orchestration and the log-and-fall-back policy."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any

import pytest

from ascii_weather.exceptions import GeocodeError, LocationLookupError, WeatherProviderError
from ascii_weather.location import Location
from ascii_weather.service import ForecastService
from ascii_weather.weather import DailyForecast, ForecastSet


def _settings() -> Any:
    return SimpleNamespace(
        default_city="Minneapolis",
        default_region="Minnesota",
        default_country="US",
        default_latitude="44.98",
        default_longitude="-93.2638",
        temperature_unit="fahrenheit",
    )


class _FakeResolver:
    def __init__(self, result: Location | Exception) -> None:
        self.result = result
        self.closed = False

    def resolve(self) -> Location:
        if isinstance(self.result, Exception):
            raise self.result
        return self.result

    def close(self) -> None:
        self.closed = True


class _FakeGeocoder:
    def __init__(self, result: tuple[str, str] | Exception) -> None:
        self.result = result
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def lookup(self, city: str, state: str) -> tuple[str, str]:
        self.calls.append((city, state))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result

    def close(self) -> None:
        self.closed = True


class _FakeWeather:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def fetch_forecast(self, *, latitude: str, longitude: str) -> ForecastSet:
        self.calls.append((latitude, longitude))
        if self.error is not None:
            raise self.error
        return ForecastSet(
            latitude=latitude,
            longitude=longitude,
            days=[
                DailyForecast(
                    date_text="2024-10-13",
                    weather_code=0,
                    temperature_max=75.4,
                    temperature_min=60.2,
                )
            ],
        )

    def close(self) -> None:
        self.closed = True


def _service(
    *,
    resolver: Any = None,
    geocoder: Any = None,
    weather: Any = None,
) -> ForecastService:
    return ForecastService(
        settings=_settings(),
        logger=logging.getLogger("test_forecast_service"),
        resolver=resolver or _FakeResolver(Location(city="X", region="Y")),
        geocoder=geocoder or _FakeGeocoder(("34.05", "-118.24")),
        weather=weather or _FakeWeather(),
    )


def test_current_location_uses_ip_lookup() -> None:
    resolved = Location(city="Denver", region="Colorado", latitude="39.7", longitude="-104.9")
    weather = _FakeWeather()
    service = _service(resolver=_FakeResolver(resolved), weather=weather)

    result = service.for_current_location()

    assert result.location == resolved
    assert weather.calls == [("39.7", "-104.9")]
    assert len(result.forecast) == 1


def test_ip_lookup_failure_falls_back_to_default_location(
    caplog: pytest.LogCaptureFixture,
) -> None:
    weather = _FakeWeather()
    service = _service(
        resolver=_FakeResolver(LocationLookupError("ipinfo unreachable")),
        weather=weather,
    )

    with caplog.at_level(logging.WARNING, logger="test_forecast_service"):
        result = service.for_current_location()

    assert result.location.city == "Minneapolis"
    assert result.location.region == "Minnesota"
    assert result.location.latitude == "44.98"
    assert result.location.longitude == "-93.2638"
    assert weather.calls == [("44.98", "-93.2638")]
    assert "ipinfo unreachable" in caplog.text


def test_city_state_lookup_keeps_typed_names() -> None:
    geocoder = _FakeGeocoder(("34.0536909", "-118.242766"))
    service = _service(geocoder=geocoder)

    result = service.for_city_state("Los Angeles", "CA")

    assert geocoder.calls == [("Los Angeles", "CA")]
    assert result.location.city == "Los Angeles"
    assert result.location.region == "CA"
    assert result.location.latitude == "34.0536909"


def test_zero_result_geocode_becomes_unknown() -> None:
    weather = _FakeWeather()
    service = _service(geocoder=_FakeGeocoder(("0.0", "0.0")), weather=weather)

    result = service.for_city_state("Atlantis", "ZZ")

    assert result.location.city == "Unknown"
    assert result.location.region == "Unknown"
    assert (result.location.latitude, result.location.longitude) == ("0.0", "0.0")
    assert weather.calls == [("0.0", "0.0")]


def test_geocode_failure_is_logged_and_becomes_unknown(
    caplog: pytest.LogCaptureFixture,
) -> None:
    service = _service(geocoder=_FakeGeocoder(GeocodeError("LocationIQ down")))

    with caplog.at_level(logging.WARNING, logger="test_forecast_service"):
        location = service.geocode("Los Angeles", "CA")

    assert location.city == "Unknown"
    assert location.latitude == "0.0"
    assert "LocationIQ down" in caplog.text


def test_forecast_failure_yields_empty_forecast(caplog: pytest.LogCaptureFixture) -> None:
    service = _service(weather=_FakeWeather(WeatherProviderError("Open-Meteo 502")))

    with caplog.at_level(logging.ERROR, logger="test_forecast_service"):
        result = service.for_city_state("Los Angeles", "CA")

    assert result.location.city == "Los Angeles"
    assert result.forecast.days == []
    assert result.forecast.latitude == "34.05"
    assert "Open-Meteo 502" in caplog.text


def test_context_manager_closes_all_clients() -> None:
    resolver = _FakeResolver(Location())
    geocoder = _FakeGeocoder(("1", "2"))
    weather = _FakeWeather()
    with _service(resolver=resolver, geocoder=geocoder, weather=weather):
        pass
    assert resolver.closed and geocoder.closed and weather.closed
