# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Engine configuration."""

import logging
import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator

ENV_PREFIX = "WORKTIME_"


class EngineSettings(BaseModel):
    """Regional defaults used when the input data does not say otherwise."""

    timezone: str = "Europe/Berlin"
    country_code: str = "DE"
    region: str | None = None
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject zone names zoneinfo cannot load."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Normalize to an upper-case ISO 2-letter code."""
        if len(v) != 2:
            raise ValueError("Country code must have 2 letters")
        return v.upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from WORKTIME_* environment variables."""
        values = {}
        for field in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{field.upper()}")
            if raw:
                values[field] = raw
        return cls(**values)


@lru_cache
def get_settings() -> EngineSettings:
    """Return the process-wide settings."""
    return EngineSettings.from_env()


def configure_logging(settings: EngineSettings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("worktime").setLevel(settings.log_level)
