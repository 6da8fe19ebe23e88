"""Dispatcher — filters each log call by priority and fans it out to sinks.

Every emitter call is checked against the global ``min_level`` and
against each registered handler's own ``min_level``.  Qualifying sinks
receive either the formatter's output or the raw message.  Delivery is
synchronous and in order: the global sink first, then handlers in
registration order.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from sinklog.models.config import Formatter, HandlerDescription, LogConfig
from sinklog.models.events import LogEvent
from sinklog.models.severity import Severity
from sinklog.routing.sinks import ConsoleSink, Sink

logger = logging.getLogger(__name__)

GLOBAL_SINK_NAME = "<global>"


class SinklogError(RuntimeError):
    """Base class for sinklog errors."""


class ConfigurationError(SinklogError):
    """Raised when the dispatcher is unconfigured or given an incomplete config."""


class SinkDispatchError(SinklogError):
    """Raised in isolation mode when every invoked sink failed."""


class Dispatcher:
    """Registry of global config, context and named handlers, plus emitters.

    Parameters
    ----------
    sink:
        A single ``(str) -> None`` used as the global sink for every
        severity.  Defaults to one ``ConsoleSink`` per severity.
    isolate_sink_errors:
        When false (the default) an exception from a sink or formatter
        propagates to the emitter's caller and later sinks are skipped.
        When true, failures are logged and delivery continues;
        ``SinkDispatchError`` is raised only if every invoked sink failed.

    Usage
    -----
    >>> from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY
    >>> lines = []
    >>> d = Dispatcher(sink=lines.append)
    >>> d.set_config({}, {"min_level": 1, "level_priority": DEFAULT_LEVEL_PRIORITY})
    >>> d.info({}, "hello")
    >>> d.debug({}, "tick")
    >>> lines
    ['hello']
    """

    def __init__(
        self,
        sink: Sink | None = None,
        *,
        isolate_sink_errors: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._config: LogConfig | None = None
        self._context: Any = None
        self._handlers: dict[str, HandlerDescription] = {}
        self._sinks = self._sink_table(sink)
        self._isolate_sink_errors = isolate_sink_errors

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def set_config(self, context: Any, configuration: LogConfig | Mapping[str, Any]) -> None:
        """Replace the global context and configuration together.

        ``configuration`` may be a ``LogConfig`` or a mapping with the keys
        ``min_level``, ``level_priority`` and optionally ``formatter``.

        Raises
        ------
        ConfigurationError
            If the configuration is missing a required field or its
            priority mapping does not cover every severity.
        """
        config = _coerce_config(configuration)
        with self._lock:
            self._context = context
            self._config = config
        logger.info("Dispatcher reconfigured: min_level=%d", config.min_level)

    def add_handler(
        self, handler: HandlerDescription | Mapping[str, Any], name: str
    ) -> None:
        """Register *handler* under *name*, replacing any handler already there."""
        description = _coerce_handler(handler, name)
        with self._lock:
            replaced = name in self._handlers
            self._handlers[name] = description
        logger.info(
            "%s handler: %s (min_level=%d)",
            "Replaced" if replaced else "Registered",
            name,
            description.min_level,
        )

    def remove_handler(self, name: str) -> None:
        """Remove the handler registered under *name*; absent names are ignored."""
        with self._lock:
            removed = self._handlers.pop(name, None)
        if removed is not None:
            logger.info("Removed handler: %s", name)

    def set_sink(self, sink: Sink | None) -> None:
        """Install *sink* as the global sink; ``None`` restores the console sinks."""
        table = self._sink_table(sink)
        with self._lock:
            self._sinks = table

    @property
    def isolate_sink_errors(self) -> bool:
        return self._isolate_sink_errors

    @isolate_sink_errors.setter
    def isolate_sink_errors(self, value: bool) -> None:
        self._isolate_sink_errors = bool(value)

    @property
    def config(self) -> LogConfig | None:
        return self._config

    @property
    def context(self) -> Any:
        return self._context

    @property
    def handlers(self) -> dict[str, HandlerDescription]:
        """Return a copy of the handler mapping, in registration order."""
        with self._lock:
            return dict(self._handlers)

    # ------------------------------------------------------------------
    # Emitters
    # ------------------------------------------------------------------

    def debug(self, metadata: Mapping[Any, Any] | None, message: str) -> None:
        self._dispatch(Severity.DEBUG, message, metadata)

    def info(self, metadata: Mapping[Any, Any] | None, message: str) -> None:
        self._dispatch(Severity.INFO, message, metadata)

    def warning(self, metadata: Mapping[Any, Any] | None, message: str) -> None:
        self._dispatch(Severity.WARNING, message, metadata)

    def error(self, metadata: Mapping[Any, Any] | None, message: str) -> None:
        self._dispatch(Severity.ERROR, message, metadata)

    def log(
        self, level: Severity | str, metadata: Mapping[Any, Any] | None, message: str
    ) -> None:
        """Emit at an explicit *level* (a ``Severity`` or its string value)."""
        self._dispatch(Severity(level), message, metadata)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(
        self, level: Severity, message: str, metadata: Mapping[Any, Any] | None
    ) -> None:
        with self._lock:
            config = self._config
            context = self._context
            handlers = list(self._handlers.items())
            global_sink = self._sinks[level]

        if config is None:
            raise ConfigurationError(
                "Dispatcher is not configured; call set_config() first"
            )

        priority = config.priority(level)

        targets: list[tuple[str, Sink, Any, Formatter | None]] = []
        if priority >= config.min_level:
            targets.append((GLOBAL_SINK_NAME, global_sink, context, config.formatter))
        for name, handler in handlers:
            if priority >= handler.min_level:
                targets.append((name, handler.sink, handler.context, handler.formatter))

        if not targets:
            return

        metadata = metadata or {}

        if not self._isolate_sink_errors:
            for _, sink, sink_context, formatter in targets:
                _deliver(sink, sink_context, formatter, level, message, metadata)
            return

        errors: list[tuple[str, Exception]] = []
        for name, sink, sink_context, formatter in targets:
            try:
                _deliver(sink, sink_context, formatter, level, message, metadata)
            except Exception as exc:  # noqa: BLE001
                logger.error("Sink %s failed for %s event: %s", name, level.value, exc)
                errors.append((name, exc))

        if errors and len(errors) == len(targets):
            raise SinkDispatchError(
                f"All {len(errors)} sinks failed for {level.value} event: "
                + "; ".join(f"{name}: {exc}" for name, exc in errors)
            )

        if errors:
            logger.warning(
                "%s event: %d/%d sinks succeeded, %d failed",
                level.value,
                len(targets) - len(errors),
                len(targets),
                len(errors),
            )

    @staticmethod
    def _sink_table(sink: Sink | None) -> dict[Severity, Sink]:
        if sink is None:
            return dict(ConsoleSink.per_severity())
        if not callable(sink):
            raise TypeError(f"sink must be callable, got {type(sink).__name__}")
        return {level: sink for level in Severity}


def _deliver(
    sink: Sink,
    context: Any,
    formatter: Formatter | None,
    level: Severity,
    message: str,
    metadata: Mapping[Any, Any],
) -> None:
    """Format a fresh event for one sink (or pass the raw message) and invoke it."""
    if formatter is None:
        sink(message)
        return
    event = LogEvent(level=level, message=message, metadata=metadata)
    sink(formatter(context, event))


def _coerce_config(configuration: LogConfig | Mapping[str, Any]) -> LogConfig:
    if isinstance(configuration, LogConfig):
        return configuration
    if not isinstance(configuration, Mapping):
        raise ConfigurationError(
            f"Expected LogConfig or mapping, got {type(configuration).__name__}"
        )
    try:
        return LogConfig.model_validate(dict(configuration))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid log configuration: {exc}") from exc


def _coerce_handler(
    handler: HandlerDescription | Mapping[str, Any], name: str
) -> HandlerDescription:
    if isinstance(handler, HandlerDescription):
        return handler
    if not isinstance(handler, Mapping):
        raise ConfigurationError(
            f"Handler {name!r}: expected HandlerDescription or mapping, "
            f"got {type(handler).__name__}"
        )
    try:
        return HandlerDescription.model_validate(dict(handler))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid handler {name!r}: {exc}") from exc
