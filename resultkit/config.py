"""Configuration management using Pydantic Settings.

Loads configuration from ``RESULTKIT_``-prefixed environment variables with
validation.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def level_number(name: str) -> int:
    """Map a level name such as "debug" to its logging constant.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {name}")
    return level


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by configure_logging() (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Record decoding
    record_extra: Literal["forbid", "ignore"] = Field(
        default="forbid",
        description="How from_record() treats keys other than ok/value/error",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level_number(value)
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
