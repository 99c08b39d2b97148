"""Daily forecast provider and weather code catalog."""

from .base import WeatherProvider
from .codes import WeatherClass, description, glyph_row, weather_class
from .models import DailyForecast, ForecastSet
from .open_meteo import OpenMeteoWeatherProvider

__all__ = [
    "DailyForecast",
    "ForecastSet",
    "OpenMeteoWeatherProvider",
    "WeatherClass",
    "WeatherProvider",
    "description",
    "glyph_row",
    "weather_class",
]
