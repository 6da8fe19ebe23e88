"""Severity levels — the closed set of log levels an emitter can tag."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """The four log severities.

    The enum carries no ordering of its own.  Numeric priority always comes
    from the ``level_priority`` supplied in ``LogConfig``, so callers can
    re-rank levels without touching this type.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


DEFAULT_LEVEL_PRIORITY: dict[Severity, int] = {
    Severity.DEBUG: 0,
    Severity.INFO: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
}
