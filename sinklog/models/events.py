"""Log events — the record handed to formatters."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sinklog.models.severity import Severity


class LogEvent(BaseModel):
    """A single log call as seen by a formatter.

    Built fresh for every sink that qualifies for the call and never
    mutated afterwards.

    Examples
    --------
    >>> event = LogEvent(level="warning", message="disk low")
    >>> event.level
    <Severity.WARNING: 'warning'>
    >>> event.metadata
    {}
    """

    model_config = ConfigDict(frozen=True)

    level: Severity
    message: str
    metadata: dict[Any, Any] = Field(default_factory=dict)
