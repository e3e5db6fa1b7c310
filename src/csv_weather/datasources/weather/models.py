"""Weather datasource models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """A geocoded location."""

    name: str
    latitude: float
    longitude: float
    timezone: str = "auto"
    country: str | None = None
