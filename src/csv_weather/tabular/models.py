"""Report row model and the fixed output schema."""

from __future__ import annotations

from dataclasses import dataclass

# Column names as written to the header, in output order
REPORT_COLUMNS = ("name", "area", "temperatureC", "humidity", "windSpeed", "pressure")

# CSV dialect shared by reader and writer
DELIMITER = ","
QUOTECHAR = '"'
LINE_TERMINATOR = "\n"


@dataclass(frozen=True)
class ReportRow:
    """One flattened (location, observation) pair."""

    name: str
    area: str
    temperature_c: int | float
    humidity: int | float
    wind_speed: int | float
    pressure: int | float

    def values(self) -> tuple[str, str, int | float, int | float, int | float, int | float]:
        """Field values in ``REPORT_COLUMNS`` order."""
        return (
            self.name,
            self.area,
            self.temperature_c,
            self.humidity,
            self.wind_speed,
            self.pressure,
        )
