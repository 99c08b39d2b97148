"""Typed models for normalized daily forecasts."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

TemperatureUnit = Literal["fahrenheit", "celsius"]

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_day(date_text: str) -> date | None:
    """Parse a zero-padded ``YYYY-MM-DD`` date; anything else is None."""
    if not _DATE_RE.fullmatch(date_text):
        return None
    try:
        return datetime.strptime(date_text, "%Y-%m-%d").date()
    except ValueError:
        return None


class DailyForecast(BaseModel):
    """One forecast day, taken from index ``i`` of each aligned source array."""

    date_text: str
    weather_code: int | None = None
    temperature_max: float | None = None
    temperature_min: float | None = None

    @property
    def day(self) -> date | None:
        """Calendar day for ``date_text``, or None when it does not parse."""
        return parse_day(self.date_text)


class ForecastSet(BaseModel):
    """Forecast days in the order the provider returned them."""

    latitude: str
    longitude: str
    temperature_unit: TemperatureUnit = "fahrenheit"
    days: list[DailyForecast] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.days)
