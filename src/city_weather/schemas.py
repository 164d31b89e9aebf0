"""
Domain models for city weather.

Pydantic models for data from the Open-Meteo APIs.  These define the
canonical schema - datasources validate API responses into these.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Geographic
# =============================================================================


class City(BaseModel):
    """A named point on the map."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Display name")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class CityMatch(City):
    """First geocoding result for a free-text city query."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    country: str | None = None


# =============================================================================
# Weather
# =============================================================================


class CurrentConditions(BaseModel):
    """Snapshot of present-moment weather at a coordinate.

    Field names follow the Open-Meteo ``current`` block.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    temperature_2m: float = Field(..., description="Air temperature at 2 m (°C)")
    precipitation_probability: int = Field(..., ge=0, le=100)
    weather_code: int = Field(..., description="WMO weather interpretation code")


# =============================================================================
# Search
# =============================================================================


class SearchStatus(StrEnum):
    """States of the city search."""

    IDLE = "idle"
    LOADING = "loading"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    ERRORED = "errored"


class SearchResult(BaseModel):
    """A resolved search: the provider's city name plus its conditions."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    country: str | None = None
    conditions: CurrentConditions
