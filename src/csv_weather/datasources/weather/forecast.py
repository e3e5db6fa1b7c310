"""Recent and upcoming hourly weather from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from csv_weather.datasources.weather.client import HOURLY_VARS, OPEN_METEO_API
from csv_weather.services import http

if TYPE_CHECKING:
    from datetime import date

    from csv_weather.datasources.weather.models import GeoPoint


def fetch_forecast_hourly(point: GeoPoint, day: date) -> dict[str, Any]:
    """
    Fetch one day of hourly weather from the forecast API.

    Covers roughly the last three months and the next 16 days.

    Args:
        point: Geocoded location.
        day: Local date to fetch.

    Returns:
        Raw API response dict with ``hourly`` key containing arrays.
    """
    params: dict[str, Any] = {
        "latitude": point.latitude,
        "longitude": point.longitude,
        "hourly": list(HOURLY_VARS.values()),
        "timezone": point.timezone,
        "start_date": day.isoformat(),
        "end_date": day.isoformat(),
    }
    resp = http.session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
