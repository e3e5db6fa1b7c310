"""
Prefect flow for building a weather report from a city list.

read-locations -> fetch-observation (per city, cached) -> merge-rows -> write-report

Run locally:
    python -m csv_weather.flows.report cities.csv report.csv 2026-10-01
"""

from __future__ import annotations

import hashlib
import re
import sys
from datetime import UTC, date, datetime, timedelta
from http import HTTPStatus
from pathlib import Path
from typing import Any

import requests
from prefect import flow, task
from pydantic import ValidationError

from csv_weather.config import get_settings
from csv_weather.datasources import weather
from csv_weather.exceptions import WeatherFetchError
from csv_weather.schemas import LocationRecord, WeatherObservation
from csv_weather.store import DataStore
from csv_weather.tabular import ReportRow, merge, read_locations, write_report

# Observation cache, created from settings on first use
store: DataStore | None = None

SOURCE = "open-meteo.com"
HISTORICAL_TTL = timedelta(days=90)
LIVE_TTL = timedelta(hours=6)


def get_store() -> DataStore:
    """Return the observation cache, opening it at the configured data dir."""
    global store  # noqa: PLW0603
    if store is None:
        store = DataStore(get_settings().data_dir)
    return store


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.casefold()).strip("-")


def observation_path(location: LocationRecord, day: date, today: date | None = None) -> Path:
    """Relative store path for a cached observation.

    Past dates live under ``historical/``, everything else under ``live/``.
    The digest keeps names that slug the same ("St. Louis" / "St Louis") apart.
    """
    today = today or date.today()
    tier = "historical" if day < today else "live"
    digest = hashlib.sha1(f"{location.name}\x1f{location.area}".encode()).hexdigest()[:8]
    stem = "-".join(s for s in (_slug(location.name), _slug(location.area), digest) if s)
    return Path(tier) / day.isoformat() / f"{stem}.json"


# =============================================================================
# Tasks
# =============================================================================


@task(name="read-locations")
def load_locations(input_path: Path) -> list[LocationRecord]:
    """Read the city list."""
    return read_locations(input_path)


def retry_on_transient(_task: Any, _task_run: Any, state: Any) -> bool:
    """Retry condition for fetch-observation.

    Unknown cities, missing data and 4xx responses (except 429) fail the same
    way every time, so they are not retried.
    """
    try:
        state.result()
    except WeatherFetchError:
        return False
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        if status is None:
            return True
        return status == HTTPStatus.TOO_MANY_REQUESTS or status >= HTTPStatus.INTERNAL_SERVER_ERROR
    except Exception:  # noqa: BLE001
        return True
    return True


@task(
    name="fetch-observation",
    retries=2,
    retry_delay_seconds=5,
    retry_condition_fn=retry_on_transient,
)
def fetch_weather(location: LocationRecord, day: date) -> WeatherObservation:
    """Fetch the daily weather for one city from Open-Meteo."""
    return weather.fetch_observation(location, day)


@task(name="load-observation")
def load_observation(location: LocationRecord, day: date) -> WeatherObservation | None:
    """Return a cached observation if it is still fresh."""
    path = observation_path(location, day)
    data = get_store().read_fresh(path)
    if data is None:
        return None
    try:
        return WeatherObservation.model_validate(data)
    except ValidationError:
        print(f"Warning: ignoring invalid cached observation {path}, fetching again.")
        return None


@task(name="save-observation")
def save_observation(location: LocationRecord, day: date, observation: WeatherObservation) -> Path:
    """Cache an observation; past dates stay valid much longer than forecasts."""
    ttl = HISTORICAL_TTL if day < date.today() else LIVE_TTL
    return get_store().write(
        observation_path(location, day),
        observation.model_dump(),
        source=SOURCE,
        valid_until=datetime.now(UTC) + ttl,
        location=location.model_dump(),
        date=day.isoformat(),
    )


@task(name="merge-rows")
def merge_rows(observations: dict[LocationRecord, WeatherObservation]) -> list[ReportRow]:
    """Flatten the location -> observation mapping."""
    return merge(observations)


@task(name="write-report")
def save_report(rows: list[ReportRow], output_path: Path, atomic: bool = False) -> Path:
    """Write the report CSV."""
    return write_report(rows, output_path, atomic=atomic)


# =============================================================================
# Flow
# =============================================================================


@flow(name="weather-report", log_prints=True)
def build_report(
    input_path: Path,
    output_path: Path,
    target_date: date | None = None,
    use_cache: bool | None = None,
    atomic: bool | None = None,
) -> dict[str, Any]:
    """
    Build the weather report for every city in ``input_path``.

    Args:
        input_path: Two-column city list (name,area), no header.
        output_path: Report CSV to create or replace.
        target_date: Observation date (default: today).
        use_cache: Read/write the observation cache (default: settings).
        atomic: Write via temp file + rename (default: settings).
    """
    settings = get_settings()
    day = target_date or date.today()
    if use_cache is None:
        use_cache = settings.use_cache
    if atomic is None:
        atomic = settings.atomic_writes

    print(f"Reading locations from {input_path}...")
    locations = load_locations(input_path)

    unique = list(dict.fromkeys(locations))
    if len(unique) < len(locations):
        print(f"Warning: {len(locations) - len(unique)} duplicate location(s) ignored.")

    # Insertion order follows the input file, so rows do too
    observations: dict[LocationRecord, WeatherObservation] = {}
    for location in unique:
        cached = load_observation(location, day) if use_cache else None
        if cached is not None:
            print(f"{location}: cached observation is fresh, skipping fetch.")
            observations[location] = cached
            continue

        print(f"Fetching weather for {location} on {day.isoformat()}...")
        observation = fetch_weather(location, day)
        if use_cache:
            save_observation(location, day, observation)
        observations[location] = observation

    rows = merge_rows(observations)

    print(f"Writing {len(rows)} rows to {output_path}...")
    written = save_report(rows, output_path, atomic)

    return {
        "locations": len(unique),
        "rows": len(rows),
        "output": str(written),
        "date": day.isoformat(),
    }


if __name__ == "__main__":
    args = sys.argv[1:]
    result = build_report(
        Path(args[0]),
        Path(args[1]),
        date.fromisoformat(args[2]) if len(args) > 2 else None,  # noqa: PLR2004
    )
    print(f"Flow complete: {result}")
