"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fncase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.compose.strict
    True
    >>> settings.logging.level
    'WARNING'
    
    # Or with environment variables:
    # FNCASE_COMPOSE_TRACE=true
    # FNCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="FNCASE_LOG_",
        extra="ignore",
    )
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    
    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ComposeSettings(BaseSettings):
    """Composition behavior, captured when each composed function is built."""
    
    model_config = SettingsConfigDict(
        env_prefix="FNCASE_COMPOSE_",
        extra="ignore",
    )
    
    strict: bool = Field(default=True, description="Reject non-callable operands at composition time")
    trace: bool = Field(default=False, description="Log every stage invocation at DEBUG level")


class FncaseSettings(BaseSettings):
    """Root settings for fncase.
    
    Loads configuration from environment variables with FNCASE_ prefix.
    
    Example environment variables:
        FNCASE_DEBUG=true
        FNCASE_LOG_LEVEL=DEBUG
        FNCASE_COMPOSE_STRICT=false
        FNCASE_COMPOSE_TRACE=true
    """
    
    model_config = SettingsConfigDict(
        env_prefix="FNCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    debug: bool = Field(default=False, description="Enable debug mode")
    
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    compose: ComposeSettings = Field(default_factory=ComposeSettings)
    
    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FncaseSettings:
    """Get the global settings instance (cached)."""
    return FncaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    Functions composed before the call keep the settings they captured.
    """
    get_settings.cache_clear()
