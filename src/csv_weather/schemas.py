"""
Domain models.

Both records are frozen pydantic models: equality and hashing are structural,
so a ``LocationRecord`` works as a dict key and two reads of the same city
compare equal.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocationRecord(BaseModel):
    """A city from the input list."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="City name")
    area: str = Field(default="", description="Region, country or continent")

    def __str__(self) -> str:
        return f"{self.name}, {self.area}" if self.area else self.name


class WeatherObservation(BaseModel):
    """Daily weather for one location.

    Values are kept as given: ints stay ints so they are written without a
    trailing ``.0``.
    """

    model_config = ConfigDict(frozen=True)

    temperature_c: int | float = Field(..., description="Air temperature, degrees C")
    humidity: int | float = Field(..., description="Relative humidity, %")
    wind_speed: int | float = Field(..., description="Wind speed, km/h")
    pressure: int | float = Field(..., description="Sea-level pressure, millibars")
