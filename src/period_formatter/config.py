"""
Application settings.

Values come from ``PERIOD_FORMATTER_*`` environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and template filters."""

    model_config = SettingsConfigDict(
        env_prefix="PERIOD_FORMATTER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "period-formatter"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "WARNING"
    default_separator: str = Field(default="-", min_length=1)
    default_max_length: int | None = Field(default=None, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
