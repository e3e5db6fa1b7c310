"""Open-Meteo weather data source.

Public API:
  - geocoding: geocode (city name + area -> coordinates)
  - forecast: fetch_forecast_hourly (recent and upcoming days)
  - historical: fetch_historical_hourly (archive API for past dates)
  - observations: fetch_observation (daily means as a WeatherObservation)
  - client: API URLs, shared constants
"""

from csv_weather.datasources.weather.client import (
    OPEN_METEO_API,
    OPEN_METEO_GEOCODING,
    OPEN_METEO_HISTORICAL,
)
from csv_weather.datasources.weather.forecast import fetch_forecast_hourly
from csv_weather.datasources.weather.geocoding import geocode
from csv_weather.datasources.weather.historical import fetch_historical_hourly
from csv_weather.datasources.weather.models import GeoPoint
from csv_weather.datasources.weather.observations import fetch_observation

__all__ = [
    "OPEN_METEO_API",
    "OPEN_METEO_GEOCODING",
    "OPEN_METEO_HISTORICAL",
    "GeoPoint",
    "fetch_forecast_hourly",
    "fetch_historical_hourly",
    "fetch_observation",
    "geocode",
]
