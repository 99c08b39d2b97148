"""Location resolution: IP geolocation and city/state geocoding."""

from .geocode import NO_MATCH, LocationIQGeocoder
from .ipinfo import IPInfoLocationResolver
from .models import UNKNOWN, Location

__all__ = [
    "IPInfoLocationResolver",
    "Location",
    "LocationIQGeocoder",
    "NO_MATCH",
    "UNKNOWN",
]
