"""Open-Meteo API client constants and shared request handling.

API docs:
  - Forecast: https://open-meteo.com/en/docs
  - Geocoding: https://open-meteo.com/en/docs/geocoding-api
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from city_weather.config import get_settings
from city_weather.services.http import session

logger = logging.getLogger(__name__)

# Current-conditions variables we request from the forecast API
CURRENT_VARS = [
    "temperature_2m",
    "precipitation_probability",
    "weather_code",
]


class LookupFailure(Exception):
    """A request to Open-Meteo failed or its body could not be parsed.

    The underlying exception is chained as ``__cause__``.
    """


def forecast_api_url() -> str:
    return get_settings().forecast_api_url


def geocoding_api_url() -> str:
    return get_settings().geocoding_api_url


def get_json(url: str, params: dict[str, Any]) -> dict[str, Any]:
    """
    GET ``url`` and return the decoded JSON object.

    Raises:
        LookupFailure: On transport errors, HTTP error statuses, or a body
            that is not a JSON object.
    """
    try:
        resp = session.get(url, params=params)
        resp.raise_for_status()
        body = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.debug("Request to %s failed: %s", url, e)
        raise LookupFailure(f"Request to {url} failed: {e}") from e

    if not isinstance(body, dict):
        msg = f"Expected a JSON object from {url}, got {type(body).__name__}"
        raise LookupFailure(msg)
    return body
