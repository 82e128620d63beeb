"""Mini README: Centralised configuration for the fleet budget tracker.

Structure:
    * FleetSettings - Pydantic settings model read from ``FLEET_*`` variables.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The CLI reads ``get_settings()`` for the snapshot location, the encoding
    used for delimited imports, and the default log level. Command line
    options override whatever the environment provides.
"""

from __future__ import annotations

import codecs
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FleetSettings(BaseSettings):
    """Runtime configuration for the fleet tracker."""

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    snapshot_path: Path = Field(
        Path("FleetData.db"),
        description="File the fleet snapshot is loaded from and saved to.",
    )
    import_encoding: str = Field(
        "utf-8-sig",
        description="Text encoding of delimited import files; the -sig variant drops a BOM.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root log level; keep at WARNING or above for a quiet menu.",
    )

    @field_validator("snapshot_path", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand ``~`` so snapshots can live in the user's home directory."""

        return Path(value).expanduser()

    @field_validator("import_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        """Reject codec names Python cannot open files with."""

        try:
            codecs.lookup(value)
        except LookupError as error:
            raise ValueError(f"Unknown encoding: {value}") from error
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> FleetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FleetSettings()
