"""Typed theme/state models for the terminal forecast view."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..service import LocationForecast
from ..weather.codes import WeatherClass


@dataclass(frozen=True, slots=True)
class RenderTheme:
    """Rich style strings applied to the header and glyph rows."""

    title: str = "bold #00ff41"
    sunny: str = "#f9d71c"
    rain: str = "#add8e6"
    cloud: str = "#ffffff"
    message: str = "yellow"

    def glyph_style(self, weather_class: WeatherClass | None, row: int) -> str | None:
        if weather_class is WeatherClass.SUNNY:
            return self.sunny
        if weather_class is WeatherClass.RAIN:
            return self.rain
        if weather_class is WeatherClass.CLOUDY and row in (1, 2):
            return self.cloud
        return None


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the interactive view needs to draw one frame."""

    current: LocationForecast
    input: str = ""
    message: str = ""
    quit: bool = False

    def evolve(self, **changes: object) -> ViewState:
        return replace(self, **changes)
