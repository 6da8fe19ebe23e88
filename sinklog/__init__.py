"""sinklog: leveled logging with a pluggable formatter and named handlers.

The module-level functions below operate on a process-wide default
``Dispatcher`` and ``LogCapture``, so the API can be used ambiently::

    import sinklog
    from sinklog.models import DEFAULT_LEVEL_PRIORITY

    sinklog.set_config({"service": "api"}, {
        "min_level": 1,
        "level_priority": DEFAULT_LEVEL_PRIORITY,
    })
    sinklog.warning({"disk": "/var"}, "disk low")

Tests that want isolation construct their own ``Dispatcher`` or call
``sinklog.reset()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sinklog.capture import LogCapture
from sinklog.config import SinklogSettings
from sinklog.models import (
    DEFAULT_LEVEL_PRIORITY,
    Formatter,
    HandlerDescription,
    LogConfig,
    LogEvent,
    Severity,
)
from sinklog.routing.dispatcher import (
    ConfigurationError,
    Dispatcher,
    SinkDispatchError,
    SinklogError,
)
from sinklog.routing.sinks import Sink

__version__ = "0.1.0"

_dispatcher = Dispatcher()
_capture = LogCapture()


def get_dispatcher() -> Dispatcher:
    """Return the process-wide default dispatcher."""
    return _dispatcher


def get_capture() -> LogCapture:
    """Return the process-wide default capture."""
    return _capture


def reset() -> None:
    """Replace the default dispatcher and capture with fresh instances."""
    global _dispatcher, _capture
    _dispatcher = Dispatcher()
    _capture = LogCapture()


def set_config(context: Any, configuration: LogConfig | Mapping[str, Any]) -> None:
    _dispatcher.set_config(context, configuration)


def add_handler(handler: HandlerDescription | Mapping[str, Any], name: str) -> None:
    _dispatcher.add_handler(handler, name)


def remove_handler(name: str) -> None:
    _dispatcher.remove_handler(name)


def set_sink(sink: Sink | None) -> None:
    _dispatcher.set_sink(sink)


def debug(metadata: Mapping[Any, Any] | None, message: str) -> None:
    _dispatcher.debug(metadata, message)


def info(metadata: Mapping[Any, Any] | None, message: str) -> None:
    _dispatcher.info(metadata, message)


def warning(metadata: Mapping[Any, Any] | None, message: str) -> None:
    _dispatcher.warning(metadata, message)


def error(metadata: Mapping[Any, Any] | None, message: str) -> None:
    _dispatcher.error(metadata, message)


def test_handler(name: str) -> Sink:
    """Reset the capture buffer *name* and return a sink that appends to it."""
    return _capture.handler(name)


# Keep pytest from collecting this when a test module imports it by name.
test_handler.__test__ = False


def get_test_logs(name: str) -> list[str]:
    """Return the captured lines for *name* (``[]`` if never registered)."""
    return _capture.logs(name)


def configure_from_env(
    formatter: Formatter | None = None,
    settings: SinklogSettings | None = None,
) -> None:
    """Configure the default dispatcher from SINKLOG_* settings."""
    settings = settings or SinklogSettings()
    _dispatcher.isolate_sink_errors = settings.isolate_sink_errors
    _dispatcher.set_config(settings.context, settings.to_log_config(formatter))


__all__ = [
    "__version__",
    # models
    "Severity",
    "DEFAULT_LEVEL_PRIORITY",
    "LogEvent",
    "LogConfig",
    "HandlerDescription",
    # dispatch
    "Dispatcher",
    "LogCapture",
    "SinklogError",
    "ConfigurationError",
    "SinkDispatchError",
    "Sink",
    # default instances
    "get_dispatcher",
    "get_capture",
    "reset",
    "set_config",
    "add_handler",
    "remove_handler",
    "set_sink",
    "debug",
    "info",
    "warning",
    "error",
    "test_handler",
    "get_test_logs",
    "configure_from_env",
]
