"""
Library settings.

Values are read from the environment, optionally seeded from a `.env` file in
the project root.

Environment variables:
- DATE_TASKS_LOCAL_TIMEZONE: IANA timezone used for naive datetimes and for
  date strings that carry no zone (default: UTC)
"""

from __future__ import annotations

import logging
import os
from datetime import timezone, tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

# Look for .env in the project root (one level above this package)
env_path = Path(__file__).parent.parent / ".env"

LOCAL_TIMEZONE_ENV: str = "DATE_TASKS_LOCAL_TIMEZONE"
DEFAULT_LOCAL_TIMEZONE: str = "UTC"


def resolve_timezone(name: str) -> tzinfo:
    """
    Resolve an IANA timezone name.

    "UTC" maps to `datetime.timezone.utc` so the default works without a
    timezone database installed.
    """

    if name.strip().upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name.strip())


class Settings(BaseModel):
    """Validated library settings."""

    local_timezone: str = DEFAULT_LOCAL_TIMEZONE

    model_config = {"frozen": True}

    @field_validator("local_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("local_timezone must not be empty")
        try:
            resolve_timezone(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value.strip()

    @property
    def zone(self) -> tzinfo:
        return resolve_timezone(self.local_timezone)


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Raises pydantic.ValidationError if a value is invalid (fail fast).
    """

    load_dotenv(dotenv_path=env_path)

    local_timezone = os.getenv(LOCAL_TIMEZONE_ENV) or DEFAULT_LOCAL_TIMEZONE
    settings = Settings(local_timezone=local_timezone)

    logger.debug(
        "Loaded date_tasks settings",
        extra={"local_timezone": settings.local_timezone},
    )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""

    return load_settings()


__all__ = [
    "DEFAULT_LOCAL_TIMEZONE",
    "LOCAL_TIMEZONE_ENV",
    "Settings",
    "get_settings",
    "load_settings",
    "resolve_timezone",
]
