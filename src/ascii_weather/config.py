"""Typed settings loader for the terminal forecast viewer."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ipinfo_url: str = Field(default="https://ipinfo.io/json", alias="IPINFO_URL")
    locationiq_url: str = Field(
        default="https://us1.locationiq.com/v1/search.php",
        alias="LOCATIONIQ_URL",
    )
    locationiq_api_key: str | None = Field(
        default=None, alias="LOCATIONIQ_API_KEY", repr=False
    )
    open_meteo_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        alias="OPEN_METEO_URL",
    )
    http_timeout_seconds: float = Field(default=15.0, alias="HTTP_TIMEOUT_SECONDS")
    http_user_agent: str = Field(default="ascii-weather/0.1", alias="HTTP_USER_AGENT")

    temperature_unit: Literal["fahrenheit", "celsius"] = Field(
        default="fahrenheit",
        alias="TEMPERATURE_UNIT",
    )
    column_width: int = Field(default=25, alias="COLUMN_WIDTH")

    default_city: str = Field(default="Minneapolis", alias="DEFAULT_CITY")
    default_region: str = Field(default="Minnesota", alias="DEFAULT_REGION")
    default_country: str = Field(default="US", alias="DEFAULT_COUNTRY")
    default_latitude: str = Field(default="44.98", alias="DEFAULT_LATITUDE")
    default_longitude: str = Field(default="-93.2638", alias="DEFAULT_LONGITUDE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, alias="LOG_FILE")

    @field_validator("locationiq_api_key", "log_file", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat an empty env string as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @model_validator(mode="after")
    def validate_settings(self) -> Settings:
        """Validate numeric bounds and the fallback coordinates."""
        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be > 0.")
        if self.column_width <= 0:
            raise ValueError("COLUMN_WIDTH must be > 0.")
        if not self.http_user_agent.strip():
            raise ValueError("HTTP_USER_AGENT must not be empty.")

        # Coordinates stay text so they pass through to query strings verbatim.
        try:
            lat = float(self.default_latitude)
            lon = float(self.default_longitude)
        except ValueError as exc:
            raise ValueError(
                "DEFAULT_LATITUDE and DEFAULT_LONGITUDE must be decimal numbers."
            ) from exc
        if not (-90 <= lat <= 90):
            raise ValueError("DEFAULT_LATITUDE must be between -90 and 90.")
        if not (-180 <= lon <= 180):
            raise ValueError("DEFAULT_LONGITUDE must be between -180 and 180.")

        self.log_level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL '{self.log_level}' is not a known logging level.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "ipinfo_url": self.ipinfo_url,
            "locationiq_url": self.locationiq_url,
            "locationiq_key_configured": self.locationiq_api_key is not None,
            "open_meteo_url": self.open_meteo_url,
            "http_timeout_seconds": self.http_timeout_seconds,
            "temperature_unit": self.temperature_unit,
            "column_width": self.column_width,
            "default_location": f"{self.default_city}, {self.default_region}",
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
