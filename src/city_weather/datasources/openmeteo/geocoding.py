"""City name resolution via the Open-Meteo Geocoding API."""

from __future__ import annotations

from pydantic import ValidationError

from city_weather.datasources.openmeteo import client
from city_weather.schemas import CityMatch


def resolve_city(name: str) -> CityMatch | None:
    """
    Resolve a free-text city name to the provider's best match.

    Only the first result is used; the provider ranks by relevance and
    population.  No disambiguation.

    Returns:
        The first match, or None if the provider returned no results.

    Raises:
        LookupFailure: If the request fails or the first result is malformed.
    """
    url = client.geocoding_api_url()
    data = client.get_json(url, {"name": name})

    results = data.get("results")
    if results is None:
        return None
    if not isinstance(results, list):
        msg = f"Malformed geocoding results for {name!r}"
        raise client.LookupFailure(msg)
    if not results:
        return None

    try:
        return CityMatch.model_validate(results[0])
    except ValidationError as e:
        msg = f"Malformed geocoding result for {name!r}"
        raise client.LookupFailure(msg) from e
