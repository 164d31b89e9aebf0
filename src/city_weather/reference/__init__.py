"""Static reference data.

Data that doesn't change with API calls.

Adding a new module:
1. Create ``reference/{name}.py`` with constants
2. Re-export from this ``__init__.py``
"""

from city_weather.reference.cities import PREDEFINED_CITIES as PREDEFINED_CITIES
