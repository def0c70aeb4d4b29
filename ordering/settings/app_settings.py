from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Ordering settings.

    Every field reads the matching ORDERING_* environment variable
    (or .env entry), e.g. log_level -> ORDERING_LOG_LEVEL.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")              # ORDERING_LOG_LEVEL
    default_currency: str = Field(default="USD")        # ORDERING_DEFAULT_CURRENCY
    publish_events: bool = Field(default=True)          # ORDERING_PUBLISH_EVENTS

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("default_currency")
    @classmethod
    def _non_empty_currency(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_currency cannot be empty")
        return value.strip()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
