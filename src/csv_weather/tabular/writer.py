"""Write the enriched report CSV.

Output format::

    name,area,temperatureC,humidity,windSpeed,pressure
    Kyiv,Europe,5.0,80,3.2,1012

Fields containing the delimiter, a quote or a line break are quoted so any
standard CSV reader gets the original value back.
"""

from __future__ import annotations

import csv
import logging
import math
import os
import tempfile
from numbers import Real
from pathlib import Path
from typing import TYPE_CHECKING

from csv_weather.exceptions import FileAccessError, SerializationError
from csv_weather.tabular.models import DELIMITER, LINE_TERMINATOR, QUOTECHAR, REPORT_COLUMNS

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import IO

    from csv_weather.tabular.models import ReportRow

logger = logging.getLogger(__name__)


def write_report(rows: Iterable[ReportRow], path: Path | str, *, atomic: bool = False) -> Path:
    """
    Write the header and one line per row, replacing ``path``.

    The header is always written, so an empty ``rows`` gives a header-only
    file. Without ``atomic`` the target is truncated in place and its
    contents are undefined if writing fails part way.

    Args:
        rows: Report rows, written in iteration order.
        path: Output CSV path. Its parent directory must exist.
        atomic: Write to a temp file in the same directory and rename it
            over ``path`` on success.

    Returns:
        The written path.

    Raises:
        FileAccessError: The path cannot be opened for writing.
        SerializationError: A value cannot be encoded.
    """
    path = Path(path)
    if atomic:
        return _write_atomic(rows, path)

    try:
        f = path.open("w", newline="", encoding="utf-8")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    with f:
        count = _write_rows(f, rows, path)

    logger.debug("Wrote %d rows to %s", count, path)
    return path


def _write_atomic(rows: Iterable[ReportRow], path: Path) -> Path:
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
            count = _write_rows(f, rows, path)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise FileAccessError(path, e.strerror or str(e)) from e
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d rows to %s (atomic)", count, path)
    return path


def _write_rows(f: IO[str], rows: Iterable[ReportRow], path: Path) -> int:
    writer = csv.writer(
        f,
        delimiter=DELIMITER,
        quotechar=QUOTECHAR,
        lineterminator=LINE_TERMINATOR,
        quoting=csv.QUOTE_MINIMAL,
    )
    count = 0
    try:
        writer.writerow(REPORT_COLUMNS)
        for row in rows:
            values = zip(row.values(), REPORT_COLUMNS, strict=True)
            writer.writerow([_encode(value, column) for value, column in values])
            count += 1
    except csv.Error as e:
        raise SerializationError(f"{path}, row {count + 1}: {e}") from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e
    return count


def _encode(value: object, column: str) -> str | int | float:
    """Validate a single field value before handing it to the csv writer."""
    if isinstance(value, str):
        return value
    # bool is a Real subclass but not a measurement
    if isinstance(value, bool) or not isinstance(value, Real):
        msg = f"cannot encode {type(value).__name__} value {value!r} in column {column!r}"
        raise SerializationError(msg)
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"cannot encode non-finite value {value!r} in column {column!r}"
        raise SerializationError(msg)
    return value  # type: ignore[return-value]
