"""
Configuration — typed, validated settings for the command-line front end.

Uses pydantic-settings to load from environment variables prefixed with
ENDEAVOUR_ (ENDEAVOUR_LOG_LEVEL, ENDEAVOUR_LOG_FORMAT), falling back to a
.env file in the working directory and then to defaults.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EndeavourSettings(BaseSettings):
    """
    Settings for the `endeavour` command.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDEAVOUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum structlog level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console for humans, json for log shippers",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard level name, case-insensitively."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
