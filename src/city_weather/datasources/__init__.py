"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, shared request handling
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions validate responses into ``city_weather.schemas`` models and
raise ``LookupFailure`` on any network or parse error.  They do not cache,
retry, or swallow errors; the board converts failures into display state.
"""
