"""Current conditions from the Open-Meteo Forecast API."""

from __future__ import annotations

from pydantic import ValidationError

from city_weather.datasources.openmeteo import client
from city_weather.schemas import CurrentConditions


def fetch_current_conditions(latitude: float, longitude: float) -> CurrentConditions:
    """
    Fetch present-moment weather for a coordinate.

    Args:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.

    Returns:
        The validated ``current`` block of the response.

    Raises:
        LookupFailure: If the request fails or the response has no usable
            ``current`` block.  Never retried.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(client.CURRENT_VARS),
    }
    url = client.forecast_api_url()
    data = client.get_json(url, params)

    current = data.get("current")
    if not isinstance(current, dict):
        msg = f"No current conditions in response for ({latitude}, {longitude})"
        raise client.LookupFailure(msg)

    try:
        return CurrentConditions.model_validate(current)
    except ValidationError as e:
        msg = f"Malformed current conditions for ({latitude}, {longitude})"
        raise client.LookupFailure(msg) from e
