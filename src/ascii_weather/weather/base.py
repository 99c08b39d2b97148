"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import ForecastSet


class WeatherProvider(ABC):
    """Base contract for daily forecast providers."""

    @abstractmethod
    def fetch_forecast(self, *, latitude: str, longitude: str) -> ForecastSet:
        """Fetch and normalize the daily forecast for a coordinate pair."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
