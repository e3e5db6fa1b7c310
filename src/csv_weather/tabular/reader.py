"""Read the input location list.

The input is a two-column CSV with no header::

    Kyiv,Europe
    Lagos,Africa
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from pydantic import ValidationError

from csv_weather.exceptions import FileAccessError, ParseError
from csv_weather.schemas import LocationRecord
from csv_weather.tabular.models import DELIMITER, QUOTECHAR

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

EXPECTED_FIELDS = 2


def read_locations(path: Path | str) -> list[LocationRecord]:
    """
    Parse a location CSV into records, preserving file order.

    Blank lines are skipped. Any other row must have exactly two fields.

    Args:
        path: Input CSV path.

    Returns:
        One LocationRecord per row.

    Raises:
        FileAccessError: The path is missing, a directory or unreadable.
        ParseError: A row is malformed or the file is not valid UTF-8.
    """
    path = Path(path)
    try:
        f = path.open("rb")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    locations: list[LocationRecord] = []
    with f:
        reader = csv.reader(_decode_lines(f, path), delimiter=DELIMITER, quotechar=QUOTECHAR)
        try:
            for row in reader:
                if not row:
                    continue
                locations.append(_parse_row(row, path, reader.line_num))
        except csv.Error as e:
            raise ParseError(path, reader.line_num, str(e)) from e

    logger.debug("Read %d locations from %s", len(locations), path)
    return locations


def _decode_lines(f: BinaryIO, path: Path) -> Iterator[str]:
    """Decode line by line so a bad byte is reported on its own line."""
    for line_num, raw in enumerate(f, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(path, line_num, f"not valid UTF-8 ({e.reason})") from e


def _parse_row(row: list[str], path: Path, line: int) -> LocationRecord:
    if len(row) != EXPECTED_FIELDS:
        msg = f"expected {EXPECTED_FIELDS} fields (name,area), got {len(row)}"
        raise ParseError(path, line, msg)
    name, area = row
    try:
        return LocationRecord(name=name, area=area)
    except ValidationError as e:
        raise ParseError(path, line, "city name must not be empty") from e
