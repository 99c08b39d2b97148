"""IP geolocation lookup against ipinfo.io."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..exceptions import LocationLookupError
from ..http_client import JsonApiClient
from .models import Location


class IPInfoLocationResolver(JsonApiClient):
    """Resolve the caller's approximate location from their public IP."""

    service_name = "ipinfo"
    error_cls = LocationLookupError

    def __enter__(self) -> IPInfoLocationResolver:
        return self

    def resolve(self) -> Location:
        payload = self._request_json(self.settings.ipinfo_url, context="location lookup")
        if not isinstance(payload, dict):
            raise LocationLookupError(
                f"ipinfo returned unexpected payload type {type(payload).__name__}."
            )
        return self._normalize_location(payload)

    @staticmethod
    def _normalize_location(payload: dict[str, Any]) -> Location:
        try:
            location = Location.model_validate(
                {
                    key: payload[key]
                    for key in ("ip", "city", "region", "country", "loc")
                    if isinstance(payload.get(key), str)
                }
            )
        except ValidationError as exc:
            raise LocationLookupError(f"ipinfo payload could not be parsed: {exc}") from exc

        # "loc" is "lat,lon"; split on the first comma only.
        lat, sep, lon = location.lat_lon.partition(",")
        if not sep:
            raise LocationLookupError(
                f"ipinfo payload 'loc' is not a 'lat,lon' pair: {location.lat_lon!r}"
            )
        return location.model_copy(update={"latitude": lat, "longitude": lon})
