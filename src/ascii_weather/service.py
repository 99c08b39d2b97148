"""Location + forecast orchestration with the log-and-fall-back error policy."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from .config import Settings
from .exceptions import GeocodeError, LocationLookupError, WeatherProviderError
from .location import UNKNOWN, IPInfoLocationResolver, Location, LocationIQGeocoder
from .location.geocode import NO_MATCH
from .weather import ForecastSet, OpenMeteoWeatherProvider


class LocationForecast(BaseModel):
    """A location and its forecast; always replaced together."""

    location: Location
    forecast: ForecastSet


def default_location(settings: Settings) -> Location:
    """Fallback used when the IP lookup fails."""
    return Location(
        ip="0.0.0.0",
        city=settings.default_city,
        region=settings.default_region,
        country=settings.default_country,
        lat_lon=f"{settings.default_latitude},{settings.default_longitude}",
        latitude=settings.default_latitude,
        longitude=settings.default_longitude,
    )


class ForecastService:
    """Runs the lookup chain once per user action; nothing is retried.

    Network and decode failures are logged and replaced by fallbacks so the
    interactive view always has something to draw.
    """

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        *,
        resolver: IPInfoLocationResolver | None = None,
        geocoder: LocationIQGeocoder | None = None,
        weather: OpenMeteoWeatherProvider | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self.resolver = resolver or IPInfoLocationResolver(settings=settings, logger=logger)
        self.geocoder = geocoder or LocationIQGeocoder(settings=settings, logger=logger)
        self.weather = weather or OpenMeteoWeatherProvider(settings=settings, logger=logger)

    def __enter__(self) -> ForecastService:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self.resolver.close()
        self.geocoder.close()
        self.weather.close()

    def current_location(self) -> Location:
        try:
            return self.resolver.resolve()
        except LocationLookupError as exc:
            fallback = default_location(self.settings)
            self.logger.warning(
                "IP location lookup failed (%s); using %s, %s",
                exc,
                fallback.city,
                fallback.region,
            )
            return fallback

    def geocode(self, city: str, state: str) -> Location:
        """Geocode ``city``/``state``; an unresolved query becomes Unknown at 0.0,0.0."""
        try:
            lat, lon = self.geocoder.lookup(city, state)
        except GeocodeError as exc:
            self.logger.warning("Geocoding %s,%s failed: %s", city, state, exc)
            lat, lon = NO_MATCH

        location = Location(city=city, region=state, latitude=lat, longitude=lon)
        if location.is_unresolved:
            location = location.model_copy(update={"city": UNKNOWN, "region": UNKNOWN})
        return location

    def forecast_for(self, location: Location) -> LocationForecast:
        try:
            forecast = self.weather.fetch_forecast(
                latitude=location.latitude,
                longitude=location.longitude,
            )
        except WeatherProviderError as exc:
            self.logger.error(
                "Forecast fetch for %s,%s failed: %s",
                location.latitude,
                location.longitude,
                exc,
            )
            forecast = ForecastSet(
                latitude=location.latitude,
                longitude=location.longitude,
                temperature_unit=self.settings.temperature_unit,
            )
        return LocationForecast(location=location, forecast=forecast)

    def for_current_location(self) -> LocationForecast:
        return self.forecast_for(self.current_location())

    def for_city_state(self, city: str, state: str) -> LocationForecast:
        return self.forecast_for(self.geocode(city, state))
