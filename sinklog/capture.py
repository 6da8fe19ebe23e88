"""In-memory capture of emitted log lines for unit tests.

``LogCapture.handler(name)`` hands out a sink that appends every line it
receives to a list kept under *name*; ``LogCapture.logs(name)`` returns
that list.  Install the sink as a handler's ``sink`` or as a dispatcher's
global sink instead of printing.
"""

from __future__ import annotations

import logging
import threading

from sinklog.routing.sinks import Sink

logger = logging.getLogger(__name__)


class LogCapture:
    """Named, ordered buffers of captured log lines.

    Examples
    --------
    >>> capture = LogCapture()
    >>> sink = capture.handler("t")
    >>> sink("hello")
    >>> capture.logs("t")
    ['hello']
    >>> capture.logs("never-registered")
    []
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._buffers: dict[str, list[str]] = {}

    def handler(self, name: str) -> Sink:
        """Reset the buffer for *name* and return a sink appending to it.

        Sinks resolve the buffer by name on every call, so a sink handed
        out earlier for the same name (and still installed) writes into
        the freshly reset buffer.
        """
        with self._lock:
            self._buffers[name] = []
        logger.debug("Capture buffer reset: %s", name)

        def _append(text: str) -> None:
            with self._lock:
                self._buffers.setdefault(name, []).append(text)

        _append.__name__ = f"capture[{name}]"
        return _append

    def logs(self, name: str) -> list[str]:
        """Return the live buffer for *name*.

        The list grows as the sink is invoked.  A name that was never
        passed to ``handler`` yields a fresh empty list that is not stored.
        """
        with self._lock:
            return self._buffers.get(name, [])

    def names(self) -> list[str]:
        """Return the names of all capture buffers, in creation order."""
        with self._lock:
            return list(self._buffers)

    def clear(self) -> None:
        """Drop every capture buffer.

        A sink that is still installed starts a new buffer on its next call.
        """
        with self._lock:
            self._buffers.clear()
