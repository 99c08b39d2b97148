"""City/state geocoding against LocationIQ."""

from __future__ import annotations

from typing import Any

import httpx

from ..exceptions import GeocodeError
from ..http_client import JsonApiClient
from .models import NO_MATCH_COORDINATE

NO_MATCH = (NO_MATCH_COORDINATE, NO_MATCH_COORDINATE)


class LocationIQGeocoder(JsonApiClient):
    """Look up coordinates for a free-text ``"{city},{state}"`` query.

    Returns ``("0.0", "0.0")`` when LocationIQ has no candidate for the
    query. Transport and decode failures raise :class:`GeocodeError`.
    """

    service_name = "LocationIQ"
    error_cls = GeocodeError

    def __enter__(self) -> LocationIQGeocoder:
        return self

    def lookup(self, city: str, state: str) -> tuple[str, str]:
        api_key = self.settings.locationiq_api_key
        if not api_key:
            raise GeocodeError("LOCATIONIQ_API_KEY is not configured; cannot geocode.")

        params = {"key": api_key, "q": f"{city},{state}", "format": "json"}
        self.logger.info("Geocoding %s,%s", city, state)
        try:
            payload = self._request_json(
                self.settings.locationiq_url, context="geocode", params=params
            )
        except GeocodeError as exc:
            # LocationIQ answers "Unable to geocode" with a 404.
            cause = exc.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return NO_MATCH
            raise

        if not isinstance(payload, list):
            raise GeocodeError(
                f"LocationIQ returned unexpected payload type {type(payload).__name__}."
            )
        return self._first_candidate(payload)

    @staticmethod
    def _first_candidate(candidates: list[Any]) -> tuple[str, str]:
        if not candidates:
            return NO_MATCH
        first = candidates[0]
        if not isinstance(first, dict):
            raise GeocodeError("LocationIQ candidate is not an object.")
        lat = first.get("lat")
        lon = first.get("lon")
        if not isinstance(lat, str) or not isinstance(lon, str):
            raise GeocodeError("LocationIQ candidate missing 'lat'/'lon' text fields.")
        return lat, lon
