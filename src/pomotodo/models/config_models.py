"""Configuration models for Pomotodo.

Session length is intentionally absent: every session runs for
``SESSION_DURATION_SECONDS``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORAGE_KEY = "pomodoro-todos"


class StorageConfig(BaseModel):
    """Task storage configuration."""

    data_dir: str | None = Field(
        default=None, description="Directory holding the task blob (platform default if unset)"
    )
    key: str = Field(default=DEFAULT_STORAGE_KEY, description="Blob key for the task list")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys become file names, so keep them plain."""
        v = v.strip()
        if not v:
            raise ValueError("key cannot be empty")
        if "/" in v or "\\" in v or v.startswith("."):
            raise ValueError("key must be a plain name")
        return v


class NotificationConfig(BaseModel):
    """Completion alert configuration."""

    sound: bool = Field(default=True)
    desktop: bool = Field(default=True)
    title: str = Field(default="Pomodoro complete!")
    message: str = Field(default="25 minutes of focus done. Take a break!")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class AppConfig(BaseModel):
    """Main Pomotodo configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
