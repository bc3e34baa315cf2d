# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Logging configuration: level names and environment-driven settings.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return logging.getLevelName(self.value)

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name case-insensitively; raises ValueError if unknown."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None


class LoggingSettings(BaseSettings):
    """Where and how log lines are written, read from ``RECORDKEEP_LOGGING_*``."""

    model_config = SettingsConfigDict(
        env_prefix="RECORDKEEP_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.WARNING.value, description="Minimum level")
    json_format: bool = Field(default=False, description="One JSON object per line")
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = Field(default=True, description="Write to stderr")
    file_enabled: bool = False
    file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        if isinstance(v, LogLevel):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """Read settings from the environment."""
        return cls()
