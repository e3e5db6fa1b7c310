"""Open-Meteo API client constants.

API docs:
  - Geocoding: https://open-meteo.com/en/docs/geocoding-api
  - Forecast: https://open-meteo.com/en/docs
  - Archive: https://open-meteo.com/en/docs/historical-weather-api
"""

OPEN_METEO_GEOCODING = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_HISTORICAL = "https://archive-api.open-meteo.com/v1/archive"

# Hourly variables we request, keyed by the WeatherObservation field they feed
HOURLY_VARS = {
    "temperature_c": "temperature_2m",
    "humidity": "relative_humidity_2m",
    "wind_speed": "wind_speed_10m",
    "pressure": "pressure_msl",
}

# Geocoding candidates to consider when matching the area
GEOCODE_CANDIDATES = 10
