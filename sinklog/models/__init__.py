"""sinklog data models — all Pydantic v2, all frozen (immutable)."""

from sinklog.models.config import Formatter, HandlerDescription, LogConfig, SinkFn
from sinklog.models.events import LogEvent
from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY, Severity

__all__ = [
    # severity
    "Severity",
    "DEFAULT_LEVEL_PRIORITY",
    # events
    "LogEvent",
    # config
    "LogConfig",
    "HandlerDescription",
    "Formatter",
    "SinkFn",
]
