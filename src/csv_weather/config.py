"""
Application settings.

Values come from environment variables prefixed with ``CSV_WEATHER_`` (or a
local ``.env`` file), e.g. ``CSV_WEATHER_DATA_DIR=/var/cache/csv-weather``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path  # noqa: TC003 — pydantic needs it at runtime
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="CSV_WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "csv-weather"
    app_env: str = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    data_dir: Path = Field(default=Path("data"), description="Observation cache directory")
    use_cache: bool = True
    atomic_writes: bool = False

    request_timeout: float = Field(default=30, gt=0, description="Default HTTP timeout (s)")
    archive_lag_days: int = Field(
        default=5,
        ge=0,
        description="Dates older than today minus this many days use the archive API",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
