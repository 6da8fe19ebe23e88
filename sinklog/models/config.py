"""Dispatch configuration records — the global config and handler descriptions.

Both records are frozen.  Reconfiguration replaces a record wholesale;
nothing is ever merged into an existing one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from sinklog.models.events import LogEvent
from sinklog.models.severity import Severity

Formatter = Callable[[Any, LogEvent], str]
SinkFn = Callable[[str], None]


class LogConfig(BaseModel):
    """Global dispatch configuration.

    ``level_priority`` is either a function ``Severity -> int`` or a mapping
    that covers every ``Severity``.  An event reaches the global sink iff
    its priority is ``>= min_level``.

    Examples
    --------
    >>> from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY
    >>> cfg = LogConfig(min_level=1, level_priority=DEFAULT_LEVEL_PRIORITY)
    >>> cfg.priority(Severity.WARNING)
    2
    >>> cfg.formatter is None
    True
    """

    model_config = ConfigDict(frozen=True)

    min_level: int
    level_priority: Callable[[Severity], int] | dict[Severity, int]
    formatter: Formatter | None = None

    @model_validator(mode="after")
    def check_priority_total(self) -> LogConfig:
        if isinstance(self.level_priority, dict):
            missing = [s.value for s in Severity if s not in self.level_priority]
            if missing:
                raise ValueError(
                    f"level_priority has no entry for: {', '.join(missing)}"
                )
        return self

    def priority(self, level: Severity) -> int:
        """Resolve the numeric priority of *level*."""
        if isinstance(self.level_priority, dict):
            return self.level_priority[level]
        return self.level_priority(level)


class HandlerDescription(BaseModel):
    """A secondary sink with its own context, formatter and threshold.

    The handler's unique name is not part of the record; it is the key
    under which the record is registered.  ``handler``/``ctx`` are accepted
    as aliases for ``sink``/``context``.
    """

    model_config = ConfigDict(frozen=True)

    sink: SinkFn = Field(validation_alias=AliasChoices("sink", "handler"))
    context: Any = Field(default=None, validation_alias=AliasChoices("context", "ctx"))
    formatter: Formatter | None = None
    min_level: int
