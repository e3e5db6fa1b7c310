"""Combine locations and their observations into report rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from csv_weather.tabular.models import ReportRow

if TYPE_CHECKING:
    from collections.abc import Mapping

    from csv_weather.schemas import LocationRecord, WeatherObservation


def flatten(location: LocationRecord, observation: WeatherObservation) -> ReportRow:
    """Location fields followed by observation fields, one by one."""
    return ReportRow(
        name=location.name,
        area=location.area,
        temperature_c=observation.temperature_c,
        humidity=observation.humidity,
        wind_speed=observation.wind_speed,
        pressure=observation.pressure,
    )


def merge(
    collection: Mapping[LocationRecord, WeatherObservation],
    *,
    sort: bool = False,
) -> list[ReportRow]:
    """
    Flatten every mapping entry into exactly one report row.

    Rows follow the mapping's iteration order (insertion order for a dict).

    Args:
        collection: Observation per unique location.
        sort: Order rows by (name, area) instead.

    Returns:
        One ReportRow per entry.
    """
    rows = [flatten(location, observation) for location, observation in collection.items()]
    if sort:
        rows.sort(key=lambda r: (r.name, r.area))
    return rows
