"""Daily weather observation for a location and date.

Geocodes the location, fetches the day's hourly series from the archive or
forecast API and reduces each variable to its daily mean.
"""

from __future__ import annotations

import logging
import statistics
from datetime import date, timedelta
from typing import Any

from csv_weather.config import get_settings
from csv_weather.datasources.weather.client import HOURLY_VARS
from csv_weather.datasources.weather.forecast import fetch_forecast_hourly
from csv_weather.datasources.weather.geocoding import geocode
from csv_weather.datasources.weather.historical import fetch_historical_hourly
from csv_weather.exceptions import WeatherFetchError
from csv_weather.schemas import LocationRecord, WeatherObservation

logger = logging.getLogger(__name__)


def use_archive(day: date, today: date | None = None, lag_days: int | None = None) -> bool:
    """Whether ``day`` is old enough to be served by the archive API."""
    today = today or date.today()
    if lag_days is None:
        lag_days = get_settings().archive_lag_days
    return day < today - timedelta(days=lag_days)


def daily_mean(values: list[float | None]) -> float | None:
    """Mean of the non-null values rounded to 0.1, or None if there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return round(statistics.fmean(present), 1)


def observation_from_hourly(data: dict[str, Any], location: LocationRecord) -> WeatherObservation:
    """
    Reduce an hourly API response to a WeatherObservation.

    Raises:
        WeatherFetchError: A variable has no values for the day.
    """
    hourly = data.get("hourly", {})
    fields: dict[str, float] = {}
    for field, var in HOURLY_VARS.items():
        mean = daily_mean(hourly.get(var, []))
        if mean is None:
            msg = f"No {var} data for {location}"
            raise WeatherFetchError(msg)
        fields[field] = mean
    return WeatherObservation(**fields)


def fetch_observation(
    location: LocationRecord,
    day: date,
    *,
    today: date | None = None,
) -> WeatherObservation:
    """
    Fetch the daily weather for a location.

    Args:
        location: City to look up.
        day: Date of the observation (local to the city).
        today: Reference date for the archive/forecast choice (tests).

    Returns:
        Daily means of temperature, humidity, wind speed and pressure.

    Raises:
        LocationNotFoundError: The city could not be geocoded.
        WeatherFetchError: The API returned no data for the day.
        requests.HTTPError: The API rejected the request.
    """
    point = geocode(location)
    if use_archive(day, today):
        logger.debug("Archive lookup for %s on %s", location, day)
        data = fetch_historical_hourly(point, day)
    else:
        logger.debug("Forecast lookup for %s on %s", location, day)
        data = fetch_forecast_hourly(point, day)
    return observation_from_hourly(data, location)
