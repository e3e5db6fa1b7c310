"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for API responses (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions go through ``csv_weather.services.http.session`` and return
dicts, dataclasses or domain models from ``csv_weather.schemas``.
"""
