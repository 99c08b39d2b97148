"""Open-Meteo (api.open-meteo.com) daily forecast provider."""

from __future__ import annotations

import logging
from typing import Any

from ..config import Settings
from ..exceptions import WeatherProviderError
from ..http_client import JsonApiClient
from .base import WeatherProvider
from .models import DailyForecast, ForecastSet

DAILY_METRICS = "weather_code,temperature_2m_max,temperature_2m_min"
_DAILY_ARRAYS = ("time", "weather_code", "temperature_2m_max", "temperature_2m_min")


class OpenMeteoWeatherProvider(JsonApiClient, WeatherProvider):
    """Fetches daily weather code and high/low temperatures from Open-Meteo."""

    service_name = "Open-Meteo"
    error_cls = WeatherProviderError

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        super().__init__(settings=settings, logger=logger)
        self.base_url = settings.open_meteo_url
        self.temperature_unit = settings.temperature_unit

    def __enter__(self) -> OpenMeteoWeatherProvider:
        return self

    def fetch_forecast(self, *, latitude: str, longitude: str) -> ForecastSet:
        """Fetch the daily forecast; coordinates are sent exactly as given."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": DAILY_METRICS,
            "temperature_unit": self.temperature_unit,
        }
        self.logger.info("Fetching forecast for %s,%s", latitude, longitude)
        payload = self._request_json(self.base_url, context="forecast fetch", params=params)
        if not isinstance(payload, dict):
            raise WeatherProviderError(
                "Open-Meteo forecast returned unexpected payload type "
                f"{type(payload).__name__}."
            )
        return ForecastSet(
            latitude=latitude,
            longitude=longitude,
            temperature_unit=self.temperature_unit,
            days=self._normalize_days(payload),
        )

    def _normalize_days(self, payload: dict[str, Any]) -> list[DailyForecast]:
        daily = payload.get("daily")
        if not isinstance(daily, dict):
            raise WeatherProviderError("Open-Meteo payload missing 'daily' object.")

        arrays: dict[str, list[Any]] = {}
        for key in _DAILY_ARRAYS:
            values = daily.get(key)
            if not isinstance(values, list):
                raise WeatherProviderError(f"Open-Meteo payload missing 'daily.{key}' list.")
            arrays[key] = values

        lengths = {key: len(values) for key, values in arrays.items()}
        if len(set(lengths.values())) > 1:
            raise WeatherProviderError(
                f"Open-Meteo daily arrays are not index-aligned: {lengths}"
            )

        return [
            DailyForecast(
                date_text=self._as_str(day_text),
                weather_code=self._as_int(code),
                temperature_max=self._as_float(high),
                temperature_min=self._as_float(low),
            )
            for day_text, code, high, low in zip(
                arrays["time"],
                arrays["weather_code"],
                arrays["temperature_2m_max"],
                arrays["temperature_2m_min"],
            )
        ]

    @staticmethod
    def _as_str(value: Any) -> str:
        if isinstance(value, str):
            return value
        return ""

    @staticmethod
    def _as_int(value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)
        return None

    @staticmethod
    def _as_float(value: Any) -> float | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        return None
