"""Shared fixtures for fncase tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from fncase import Fn, fn
from fncase.foundation.config import clear_settings_cache
from fncase.foundation.logs import ROOT_LOGGER


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings from the environment around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    """Undo handler/level changes made to the fncase logger."""
    root = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def incr() -> Fn[int, int]:
    return fn(lambda x: x + 1)


@pytest.fixture
def square() -> Fn[int, int]:
    return fn(lambda x: x * x)
