"""Tests for LogCapture and the module-level test_handler/get_test_logs."""

from __future__ import annotations

import sinklog
from sinklog.capture import LogCapture
from sinklog.models.config import HandlerDescription
from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY
from sinklog.routing.dispatcher import Dispatcher
from sinklog.routing.sinks import Sink


class TestLogCapture:
    def test_sink_appends_in_order(self, capture: LogCapture):
        sink = capture.handler("t")
        sink("one")
        sink("two")
        assert capture.logs("t") == ["one", "two"]

    def test_logs_is_live(self, capture: LogCapture):
        sink = capture.handler("t")
        logs = capture.logs("t")
        sink("later")
        assert logs == ["later"]

    def test_handler_again_resets(self, capture: LogCapture):
        sink = capture.handler("t")
        sink("old")
        capture.handler("t")
        assert capture.logs("t") == []

    def test_earlier_sink_writes_into_reset_buffer(self, capture: LogCapture):
        first = capture.handler("t")
        first("before reset")
        capture.handler("t")
        first("after reset")
        assert capture.logs("t") == ["after reset"]

    def test_unknown_name_returns_empty(self, capture: LogCapture):
        assert capture.logs("never") == []
        assert "never" not in capture.names()

    def test_names_are_independent(self, capture: LogCapture):
        a = capture.handler("a")
        b = capture.handler("b")
        a("for a")
        b("for b")
        assert capture.logs("a") == ["for a"]
        assert capture.logs("b") == ["for b"]
        assert capture.names() == ["a", "b"]

    def test_clear(self, capture: LogCapture):
        sink = capture.handler("t")
        sink("x")
        capture.clear()
        assert capture.names() == []
        sink("y")
        assert capture.logs("t") == ["y"]

    def test_usable_as_global_sink(self, capture: LogCapture):
        dispatcher = Dispatcher(sink=capture.handler("global"))
        dispatcher.set_config({}, {"min_level": 1, "level_priority": DEFAULT_LEVEL_PRIORITY})
        dispatcher.info({}, "hello")
        assert capture.logs("global") == ["hello"]

    def test_usable_as_handler_sink(self, capture: LogCapture):
        dispatcher = Dispatcher(sink=lambda text: None)
        dispatcher.set_config({}, {"min_level": 1, "level_priority": DEFAULT_LEVEL_PRIORITY})
        dispatcher.add_handler(
            HandlerDescription(sink=capture.handler("h"), min_level=3), "h"
        )
        dispatcher.warning({}, "skip")
        dispatcher.error({}, "keep")
        assert capture.logs("h") == ["keep"]


class TestModuleLevelCapture:
    def test_test_handler_and_get_test_logs(self):
        sink = sinklog.test_handler("t")
        sink("hello")
        assert sinklog.get_test_logs("t") == ["hello"]

    def test_get_test_logs_unknown_name(self):
        assert sinklog.get_test_logs("missing") == []

    def test_reset_drops_default_capture(self):
        sinklog.test_handler("t")("x")
        sinklog.reset()
        assert sinklog.get_test_logs("t") == []

    def test_test_handler_not_collected_by_pytest(self):
        assert sinklog.test_handler.__test__ is False

    def test_capture_sink_satisfies_protocol(self, capture: LogCapture):
        assert isinstance(capture.handler("t"), Sink)
