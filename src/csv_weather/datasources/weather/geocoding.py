"""Resolve city names to coordinates with the Open-Meteo Geocoding API."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from csv_weather.datasources.weather.client import GEOCODE_CANDIDATES, OPEN_METEO_GEOCODING
from csv_weather.datasources.weather.models import GeoPoint
from csv_weather.exceptions import LocationNotFoundError
from csv_weather.services import http

if TYPE_CHECKING:
    from csv_weather.schemas import LocationRecord

logger = logging.getLogger(__name__)

# Name fields the area may appear in as whole words ("Kyiv" in "Kyiv City")
_AREA_NAME_FIELDS = ("country", "admin1")


def _matches_area(result: dict[str, Any], area: str) -> bool:
    """Whether a geocoding candidate lies in ``area``.

    Country codes and timezone regions ("Europe" in "Europe/Kyiv") match
    exactly, country and admin1 names on word boundaries, all case-insensitive.
    """
    needle = area.strip().casefold()
    if not needle:
        return False
    if needle == str(result.get("country_code") or "").casefold():
        return True
    region = str(result.get("timezone") or "").partition("/")[0]
    if needle == region.casefold():
        return True
    pattern = re.compile(rf"\b{re.escape(needle)}\b")
    return any(pattern.search(str(result.get(key) or "").casefold()) for key in _AREA_NAME_FIELDS)


def geocode(location: LocationRecord) -> GeoPoint:
    """
    Look up coordinates for a location.

    The first candidate in ``location.area`` wins: same country code or
    timezone region (so ``Kyiv, Europe`` matches ``Europe/Kyiv``), or the
    area appears as whole words in the country or admin1 name. Without a match the top result is used.

    Raises:
        LocationNotFoundError: The API returned no candidates.
    """
    params: dict[str, str | int] = {
        "name": location.name,
        "count": GEOCODE_CANDIDATES,
        "language": "en",
        "format": "json",
    }
    resp = http.session.get(OPEN_METEO_GEOCODING, params=params)
    resp.raise_for_status()
    results: list[dict[str, Any]] = resp.json().get("results") or []

    if not results:
        raise LocationNotFoundError(f"No geocoding match for {location}")

    best = results[0]
    if location.area:
        matched = next((r for r in results if _matches_area(r, location.area)), None)
        if matched is None:
            logger.warning("No match for area %r, using %s", location.area, best.get("country"))
        else:
            best = matched

    return GeoPoint(
        name=best["name"],
        latitude=best["latitude"],
        longitude=best["longitude"],
        timezone=best.get("timezone") or "auto",
        country=best.get("country"),
    )
