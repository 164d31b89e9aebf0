"""Open-Meteo data source (free, no API key).

Public API:
  - current: fetch_current_conditions (forecast API ``current`` block)
  - geocoding: resolve_city (first geocoding match for a name)
  - client: LookupFailure, requested variables
"""

from city_weather.datasources.openmeteo.client import CURRENT_VARS, LookupFailure
from city_weather.datasources.openmeteo.current import fetch_current_conditions
from city_weather.datasources.openmeteo.geocoding import resolve_city

__all__ = [
    "CURRENT_VARS",
    "LookupFailure",
    "fetch_current_conditions",
    "resolve_city",
]
