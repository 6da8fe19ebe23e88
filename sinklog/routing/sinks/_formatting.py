"""Built-in formatters for sinklog sinks.

A formatter takes ``(context, event)`` and returns the exact text handed
to a sink.  Both helpers here are pure.
"""

from __future__ import annotations

import json
from typing import Any

from sinklog.models.events import LogEvent


def level_prefix_formatter(context: Any, event: LogEvent) -> str:
    """Return ``"<level>:<message>"``; the context is ignored.

    Examples
    --------
    >>> level_prefix_formatter(None, LogEvent(level="warning", message="disk low"))
    'warning:disk low'
    """
    return f"{event.level.value}:{event.message}"


def canonical_json(obj: Any) -> str:
    """Serialize *obj* deterministically: sorted keys, compact separators.

    Values JSON cannot encode are rendered with ``str``.
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True, default=str
    )


def json_formatter(context: Any, event: LogEvent) -> str:
    """Render context and event as one canonical JSON line.

    Metadata keys are converted to strings.

    Examples
    --------
    >>> json_formatter({"env": "dev"}, LogEvent(level="info", message="up"))
    '{"context":{"env":"dev"},"level":"info","message":"up","metadata":{}}'
    """
    payload = {
        "context": context,
        "level": event.level.value,
        "message": event.message,
        "metadata": {str(key): value for key, value in event.metadata.items()},
    }
    return canonical_json(payload)
