"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class LocationLookupError(Exception):
    """Raised when the IP geolocation request fails or returns malformed data."""


class GeocodeError(Exception):
    """Raised when a city/state geocoding request fails or returns malformed data."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""
