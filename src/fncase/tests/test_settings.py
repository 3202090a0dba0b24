"""Tests for settings, logging setup and error payloads."""

from __future__ import annotations

import io
import json
import logging

import pytest
from pydantic import ValidationError

from fncase import (
    CompositionError,
    ErrorCode,
    FncaseException,
    FnError,
    PropertyAccessError,
    configure_logging,
    fn,
    get_settings,
)
from fncase.foundation.config import FncaseSettings, clear_settings_cache
from fncase.foundation.logs import get_logger


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    settings = FncaseSettings(_env_file=None)
    assert settings.debug is False
    assert settings.compose.strict is True
    assert settings.compose.trace is False
    assert settings.logging.level == "WARNING"
    assert settings.effective_log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FNCASE_COMPOSE_TRACE", "true")
    monkeypatch.setenv("FNCASE_LOG_LEVEL", "info")
    monkeypatch.setenv("FNCASE_LOG_FORMAT", "json")
    settings = FncaseSettings(_env_file=None)
    assert settings.compose.trace is True
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FNCASE_DEBUG", "1")
    assert FncaseSettings(_env_file=None).effective_log_level == "DEBUG"


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FNCASE_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        FncaseSettings(_env_file=None)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("FNCASE_COMPOSE_STRICT", "false")
    assert get_settings().compose.strict is True
    clear_settings_cache()
    assert get_settings().compose.strict is False


def test_settings_are_captured_at_construction(monkeypatch: pytest.MonkeyPatch) -> None:
    before = fn(abs)
    monkeypatch.setenv("FNCASE_COMPOSE_TRACE", "true")
    clear_settings_cache()
    after = fn(abs)
    assert before._trace is False
    assert after._trace is True


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_logging_text(restore_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging(FncaseSettings(_env_file=None), stream=stream)
    get_logger("test").warning("hello %s", "world")
    assert "[WARNING] fncase.test: hello world" in stream.getvalue()


def test_configure_logging_json(monkeypatch: pytest.MonkeyPatch, restore_logger: logging.Logger) -> None:
    monkeypatch.setenv("FNCASE_LOG_FORMAT", "json")
    monkeypatch.setenv("FNCASE_LOG_LEVEL", "INFO")
    stream = io.StringIO()
    configure_logging(FncaseSettings(_env_file=None), stream=stream)
    get_logger("lens").info("built")

    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "info"
    assert record["logger"] == "fncase.lens"
    assert record["event"] == "built"
    assert "timestamp" in record


def test_configure_logging_is_idempotent(restore_logger: logging.Logger) -> None:
    settings = FncaseSettings(_env_file=None)
    configure_logging(settings, stream=io.StringIO())
    root = configure_logging(settings, stream=io.StringIO())
    assert len([h for h in root.handlers if getattr(h, "_fncase", False)]) == 1
    assert root.level == logging.WARNING


# ═════════════════════════════════════════════════════════════════════════════
# Errors
# ═════════════════════════════════════════════════════════════════════════════


def test_error_payload_render() -> None:
    error = FnError(code=ErrorCode.PROPERTY_NOT_FOUND, message="User has no property 'x'", path="x")
    assert error.render() == "[PROPERTY_NOT_FOUND] User has no property 'x' (path: x)"
    assert str(error) == error.render()


def test_error_payload_is_frozen() -> None:
    error = FnError(message="boom")
    assert error.code == ErrorCode.UNKNOWN
    with pytest.raises(ValidationError):
        error.message = "changed"  # type: ignore[misc]


def test_error_payload_requires_message() -> None:
    with pytest.raises(ValidationError):
        FnError(message="   ")


def test_exception_hierarchy() -> None:
    comp = CompositionError.not_callable(3)
    assert isinstance(comp, FncaseException)
    assert isinstance(comp, TypeError)
    assert comp.code == ErrorCode.NOT_CALLABLE
    assert "int" in str(comp)

    prop = PropertyAccessError.not_found(object(), "x")
    assert isinstance(prop, LookupError)
    assert prop.error.path == "x"
