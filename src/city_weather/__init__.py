"""City Weather - current conditions for a fixed set of cities plus a city search.

Architecture::

    datasources/   External APIs (Open-Meteo forecast + geocoding)
    reference/     Static data (predefined city list)
    board.py       Presentation controller (per-city slots, search state machine)
    renderers/     Pure data → HTML (weather cards, page) and the code classifier
    flows/         Prefect orchestration (build renders the site)
    services/      Shared utilities (HTTP session)

Data flow: datasources → board (display state) → renderers → site/index.html
"""

__version__ = "0.1.0"

from city_weather.config import Settings  # noqa: E402

__all__ = ["Settings", "__version__"]
