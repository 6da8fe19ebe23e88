"""Console sink — the default global sink, one stream per severity.

Debug and info lines go to stdout, warning and error lines to stderr.
Text is written verbatim to the console's stream: no markup, highlighting,
tab expansion or control-character stripping.
"""

from __future__ import annotations

from rich.console import Console

from sinklog.models.severity import Severity

_STDERR_LEVELS = frozenset({Severity.WARNING, Severity.ERROR})


class ConsoleSink:
    """Writes formatted log lines to the terminal.

    Parameters
    ----------
    level:
        The severity this sink serves; selects stdout or stderr.
    console:
        Optional pre-built Rich console (tests pass one with ``file=``).
    """

    def __init__(self, level: Severity, console: Console | None = None) -> None:
        self._level = Severity(level)
        self._console = console or Console(
            stderr=self._level in _STDERR_LEVELS,
            soft_wrap=True,
        )

    @property
    def level(self) -> Severity:
        return self._level

    def __call__(self, text: str) -> None:
        stream = self._console.file
        stream.write(text + "\n")
        stream.flush()

    def __repr__(self) -> str:
        stream = "stderr" if self._console.stderr else "stdout"
        return f"ConsoleSink({self._level.value!r}, {stream})"

    @classmethod
    def per_severity(cls) -> dict[Severity, ConsoleSink]:
        """Build the default sink table: one ``ConsoleSink`` per severity."""
        return {level: cls(level) for level in Severity}
