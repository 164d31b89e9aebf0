"""
Prefect flows.

Flows:
- build: Look up current conditions and render the static weather page

Usage (local):
    python -m city_weather.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m city_weather.flows.build
"""
