# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Application settings for recordkeep.

Values come from ``RECORDKEEP_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class RecordkeepSettings(BaseSettings):
    """Settings shared by the console applications."""

    model_config = SettingsConfigDict(
        env_prefix="RECORDKEEP_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        validate_assignment=True,
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Deployment environment"
    )
    data_dir: Path = Field(
        default=Path("."), description="Directory relative file names resolve against"
    )
    inventory_file: str = Field(
        default="inventory.json", description="Default inventory log file"
    )
    report_file: str = Field(
        default="report.txt", description="Default student report file"
    )
    date_format: str = Field(
        default="%Y-%m-%d", description="strptime format for date prompts"
    )

    @field_validator("inventory_file", "report_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("file name must not be blank")
        return v.strip()

    def resolve_path(self, name: str | Path) -> Path:
        """Resolve ``name`` against ``data_dir`` unless it is already absolute."""
        path = Path(name).expanduser()
        if path.is_absolute():
            return path
        return self.data_dir / path


@lru_cache(maxsize=1)
def get_settings() -> RecordkeepSettings:
    """Return the process-wide settings instance."""
    return RecordkeepSettings()
