"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

UNKNOWN = "Unknown"

# Coarse bands over WMO weather codes (https://open-meteo.com/en/docs).
# Each entry is (inclusive upper bound, label), checked in ascending order.
WEATHER_CODE_BANDS: tuple[tuple[int, str], ...] = (
    (0, "Clear"),
    (3, "Mainly Clear"),
    (45, "Fog"),
    (51, "Drizzle"),
    (63, "Rain"),
    (67, "Freezing Rain"),
    (71, "Snow"),
    (82, "Convective"),
    (95, "Thunderstorm"),
)

#: Every label ``classify`` can return, in band order.
CATEGORIES: tuple[str, ...] = (*(label for _, label in WEATHER_CODE_BANDS), UNKNOWN)


def classify(code: int) -> str:
    """Collapse a WMO weather code into a human-readable category.

    Codes outside 0..95 are "Unknown".
    """
    if code < 0:
        return UNKNOWN
    for upper, label in WEATHER_CODE_BANDS:
        if code <= upper:
            return label
    return UNKNOWN
