"""Foundation - errors, configuration and logging for fncase."""

from __future__ import annotations

from .config import ComposeSettings, FncaseSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import CompositionError, ErrorCode, FncaseException, FnError, PropertyAccessError
from .logs import JsonFormatter, configure_logging, get_logger

__all__ = [
    # Errors
    "ErrorCode", "FnError", "FncaseException", "CompositionError", "PropertyAccessError",
    # Config
    "FncaseSettings", "ComposeSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "get_logger", "JsonFormatter",
]
