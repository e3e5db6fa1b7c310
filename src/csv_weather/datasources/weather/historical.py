"""Historical hourly weather from the Open-Meteo Archive API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from csv_weather.datasources.weather.client import HOURLY_VARS, OPEN_METEO_HISTORICAL
from csv_weather.services import http

if TYPE_CHECKING:
    from datetime import date

    from csv_weather.datasources.weather.models import GeoPoint


def fetch_historical_hourly(point: GeoPoint, day: date) -> dict[str, Any]:
    """
    Fetch one day of hourly weather from the archive API.

    The archive lags real time by a few days; use the forecast API for
    recent dates.

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
    resp = http.session.get(OPEN_METEO_HISTORICAL, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
