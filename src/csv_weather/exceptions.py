"""Exception hierarchy.

Everything raised on purpose by this package derives from ``CsvWeatherError``
so the CLI can report it in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CsvWeatherError(Exception):
    """Base class for csv-weather errors."""


class FileAccessError(CsvWeatherError):
    """A path could not be opened for reading or writing."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def __reduce__(self) -> tuple[type[FileAccessError], tuple[Path, str]]:
        return (self.__class__, (self.path, self.reason))


class ParseError(CsvWeatherError):
    """An input row is malformed."""

    def __init__(self, path: Path, line: int, reason: str) -> None:
        self.path = path
        self.line = line
        self.reason = reason
        super().__init__(f"{path}, line {line}: {reason}")

    def __reduce__(self) -> tuple[type[ParseError], tuple[Path, int, str]]:
        return (self.__class__, (self.path, self.line, self.reason))


class SerializationError(CsvWeatherError):
    """A report value cannot be encoded as a CSV field."""


class WeatherFetchError(CsvWeatherError):
    """No observation could be produced for a location and date."""


class LocationNotFoundError(WeatherFetchError):
    """Geocoding returned no match for a location."""
