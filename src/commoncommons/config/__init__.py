"""Configuration management using pydantic-settings."""

from .settings import (
    DEFAULT_DATETIME_FORMATS,
    CommonsSettings,
    LoggingSettings,
    ParsingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_DATETIME_FORMATS",
    "CommonsSettings",
    "LoggingSettings",
    "ParsingSettings",
    "clear_settings_cache",
    "get_settings",
]
