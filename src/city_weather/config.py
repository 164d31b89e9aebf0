"""
Application settings.

Values come from environment variables prefixed with ``CITY_WEATHER_``
(or a local ``.env`` file), e.g. ``CITY_WEATHER_DEBUG=true``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CITY_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "city-weather"
    app_env: str = "development"
    debug: bool = False

    # Local preview server
    api_port: int = Field(default=8000, ge=1, le=65535)
    site_dir: Path = Path("site")

    # Open-Meteo endpoints
    forecast_api_url: str = "https://api.open-meteo.com/v1/forecast"
    geocoding_api_url: str = "https://geocoding-api.open-meteo.com/v1/search"

    # None keeps the transport default
    http_timeout: float | None = Field(default=None, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
