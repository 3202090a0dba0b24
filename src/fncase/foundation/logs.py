"""Logging setup for fncase.

Every module logs through a stdlib logger under the ``fncase`` namespace.
``configure_logging`` attaches a single handler to that namespace, rendering
either human-readable text or one JSON object per line.

Example:
    >>> from fncase.foundation.logs import configure_logging
    >>> configure_logging()  # reads FNCASE_LOG_LEVEL / FNCASE_LOG_FORMAT
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .config import FncaseSettings

ROOT_LOGGER = "fncase"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON."""
    
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


def get_logger(area: str) -> logging.Logger:
    """Logger for one area of the package, e.g. ``get_logger("lens")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")


def configure_logging(settings: FncaseSettings | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Install the fncase handler according to settings.
    
    Idempotent: a previously installed fncase handler is replaced, never duplicated.
    
    Args:
        settings: Settings to use (defaults to get_settings())
        stream: Output stream (default: stderr)
    
    Returns:
        The configured ``fncase`` root logger
    """
    if settings is None:
        from .config import get_settings
        settings = get_settings()
    
    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if getattr(h, "_fncase", False)]:
        root.removeHandler(handler)
    
    handler = logging.StreamHandler(stream)
    handler._fncase = True  # type: ignore[attr-defined]
    handler.setFormatter(JsonFormatter() if settings.logging.format == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(settings.effective_log_level)
    return root
