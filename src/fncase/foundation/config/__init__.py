"""Configuration management using pydantic-settings."""

from .settings import (
    ComposeSettings,
    FncaseSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ComposeSettings",
    "FncaseSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
