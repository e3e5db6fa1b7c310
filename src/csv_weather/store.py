"""JSON data store with freshness-aware caching.

Caches fetched weather observations as JSON files, organized by how long
they stay valid:
  - historical/: Observations for past dates, 90-day TTL (they don't change)
  - live/: Today's and upcoming dates, 6h TTL (forecasts get revised)

Every file is wrapped in a metadata envelope with ``valid_until`` so the
report flow can skip lookups that are still fresh.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 — used at runtime, not just annotations
from typing import Any

logger = logging.getLogger(__name__)


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.historical = base_dir / "historical"
        self.live = base_dir / "live"

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/2026-10-18/kyiv.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"open-meteo.com"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields (location, date, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def read_fresh(self, path: Path) -> dict[str, Any] | None:
        """Read the data payload only if the file exists and hasn't expired.

        Unreadable or corrupt files count as missing (a warning is logged),
        so the next write simply replaces them.
        """
        envelope = self._load_envelope(path)
        if envelope is None or not _is_valid(envelope.get("meta", {})):
            return None
        data = envelope.get("data")
        return data if isinstance(data, dict) else None

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing or corrupt, has no ``valid_until``,
        or the expiry time has passed.
        """
        envelope = self._load_envelope(path)
        return envelope is not None and _is_valid(envelope.get("meta", {}))

    def _load_envelope(self, path: Path) -> dict[str, Any] | None:
        full = self._resolve(path)
        if not full.exists():
            return None
        try:
            with full.open() as f:
                envelope = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", full, e)
            return None
        if not isinstance(envelope, dict):
            logger.warning("Ignoring cache file without an envelope: %s", full)
            return None
        return envelope


def _is_valid(meta: Any) -> bool:
    """Whether envelope metadata carries a ``valid_until`` still in the future."""
    valid_until = meta.get("valid_until") if isinstance(meta, dict) else None
    if not isinstance(valid_until, str):
        return False
    try:
        expiry = datetime.fromisoformat(valid_until)
    except ValueError:
        return False
    if expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=UTC)
    return datetime.now(UTC) < expiry
