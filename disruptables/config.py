"""
Library configuration using Pydantic Settings.

Settings are read from ``DISRUPTABLES_``-prefixed environment variables
and an optional ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DisruptablesSettings(BaseSettings):
    """Logging behaviour of the Try combinators."""

    model_config = SettingsConfigDict(
        env_prefix="DISRUPTABLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_captured_errors: bool = Field(
        default=False,
        description="Emit a debug event whenever a combinator captures an exception",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> DisruptablesSettings:
    """
    Get cached library settings.

    Returns:
        Configured DisruptablesSettings instance.
    """
    return DisruptablesSettings()
