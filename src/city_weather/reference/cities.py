"""Cities shown on the board at startup."""

from __future__ import annotations

from city_weather.schemas import City

# Order is display order; slots are keyed by position in this tuple.
PREDEFINED_CITIES: tuple[City, ...] = (
    City(name="Delhi", latitude=28.6139, longitude=77.209),
    City(name="New York", latitude=40.7128, longitude=-74.006),
    City(name="London", latitude=51.5074, longitude=-0.1278),
    City(name="Tokyo", latitude=35.6895, longitude=139.6917),
    City(name="Sydney", latitude=-33.8688, longitude=151.2093),
)
