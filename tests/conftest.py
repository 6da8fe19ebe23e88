"""Shared test fixtures for sinklog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

import sinklog
from sinklog.capture import LogCapture
from sinklog.models.config import LogConfig
from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY
from sinklog.routing.dispatcher import Dispatcher


@pytest.fixture(autouse=True)
def _fresh_defaults():
    """Give every test a fresh default dispatcher and capture."""
    sinklog.reset()
    yield
    sinklog.reset()


@pytest.fixture
def capture() -> LogCapture:
    """Provide an independent LogCapture."""
    return LogCapture()


@pytest.fixture
def global_lines() -> list[str]:
    """A list used as the dispatcher's global sink."""
    return []


@pytest.fixture
def dispatcher(global_lines: list[str]) -> Dispatcher:
    """Provide an unconfigured Dispatcher whose global sink appends to ``global_lines``."""
    return Dispatcher(sink=global_lines.append)


@pytest.fixture
def make_config() -> Callable[..., LogConfig]:
    """Factory fixture: build a LogConfig with the default priorities."""

    def _factory(min_level: int = 1, **overrides: Any) -> LogConfig:
        defaults: dict[str, Any] = {
            "min_level": min_level,
            "level_priority": DEFAULT_LEVEL_PRIORITY,
        }
        defaults.update(overrides)
        return LogConfig(**defaults)

    return _factory


@pytest.fixture
def configured(dispatcher: Dispatcher, make_config: Callable[..., LogConfig]) -> Dispatcher:
    """A dispatcher configured with min_level=1 and no formatter."""
    dispatcher.set_config({"service": "test"}, make_config())
    return dispatcher
