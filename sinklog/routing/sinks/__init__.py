"""Sink protocol and built-in sinks for sinklog dispatch.

A sink is anything callable with a single formatted string.  Plain
functions, bound methods and the capture buffers returned by
``LogCapture.handler`` all qualify.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sinklog.routing.sinks.console import ConsoleSink


@runtime_checkable
class Sink(Protocol):
    """Protocol that every sinklog sink satisfies.

    Sinks may block and may raise.  The dispatcher calls them
    synchronously, so a slow sink stalls the emitting caller.
    """

    def __call__(self, text: str) -> None:
        """Record, print or forward *text*."""
        ...


__all__ = ["Sink", "ConsoleSink"]
