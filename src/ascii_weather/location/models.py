"""Typed location record shared by the IP lookup and the geocoder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "Unknown"
NO_MATCH_COORDINATE = "0.0"


class Location(BaseModel):
    """A resolved place. Coordinates are kept as the text the APIs returned."""

    model_config = ConfigDict(populate_by_name=True)

    ip: str = ""
    city: str = UNKNOWN
    region: str = UNKNOWN
    country: str = ""
    lat_lon: str = Field(default="", alias="loc")
    latitude: str = NO_MATCH_COORDINATE
    longitude: str = NO_MATCH_COORDINATE

    @property
    def is_unresolved(self) -> bool:
        """True when geocoding fell back to the 0.0,0.0 sentinel."""
        return (
            self.latitude == NO_MATCH_COORDINATE
            and self.longitude == NO_MATCH_COORDINATE
        )
