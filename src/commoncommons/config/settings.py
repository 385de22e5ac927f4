"""Environment-based configuration using pydantic-settings.

Example:
    >>> from commoncommons.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.parsing.datetime_formats[0]
    '%m/%d/%Y'

    # Or with environment variables:
    # COMMONCOMMONS_LOG_LEVEL=DEBUG
    # COMMONCOMMONS_PARSE_DATETIME_FORMATS='["%d.%m.%Y"]'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Tried in order after ISO 8601 has been rejected
DEFAULT_DATETIME_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="COMMONCOMMONS_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ParsingSettings(BaseSettings):
    """Text parsing configuration."""

    model_config = SettingsConfigDict(
        env_prefix="COMMONCOMMONS_PARSE_",
        extra="ignore",
    )

    datetime_formats: tuple[str, ...] = Field(
        default=DEFAULT_DATETIME_FORMATS,
        description="strptime formats tried after ISO 8601",
    )

    @field_validator("datetime_formats")
    @classmethod
    def _require_formats(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not fmt.strip() for fmt in v):
            raise ValueError("datetime formats must be non-empty")
        return v


class CommonsSettings(BaseSettings):
    """Root settings for commoncommons.

    Loads configuration from environment variables with the COMMONCOMMONS_
    prefix and from a local .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMONCOMMONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    parsing: ParsingSettings = Field(default_factory=ParsingSettings)


@lru_cache(maxsize=1)
def get_settings() -> CommonsSettings:
    """Get the global settings instance (cached)."""
    return CommonsSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
