"""csv-weather - enrich a CSV list of cities with daily weather observations.

Architecture::

    tabular/       CSV I/O core (read locations, merge, write report)
    schemas.py     Immutable value records (LocationRecord, WeatherObservation)
    datasources/   External APIs (Open-Meteo geocoding, forecast, archive)
    store.py       JSON observation cache with freshness metadata
    flows/         Prefect orchestration (read -> fetch -> merge -> write)
    services/      Shared utilities (HTTP client with retry)

Data flow: input CSV -> tabular.reader -> datasources (via store) ->
tabular.merge -> tabular.writer -> output CSV
"""

__version__ = "0.1.0"

from csv_weather.config import Settings
from csv_weather.schemas import LocationRecord, WeatherObservation

__all__ = ["LocationRecord", "Settings", "WeatherObservation", "__version__"]
