"""Tests for the dispatch output base: thresholds and callback chain."""

import pytest
from dispatch_file.output import Output


class RecordingOutput(Output):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.messages = []

    def log_message(self, message):
        self.messages.append(message)


class TestConstruction:
    def test_defaults(self):
        out = RecordingOutput("rec")
        assert out.min_level == "debug"
        assert out.max_level == "emergency"
        assert out.callbacks == []

    def test_levels_normalized(self):
        out = RecordingOutput("rec", min_level="WARN", max_level="crit")
        assert out.min_level == "warning"
        assert out.max_level == "critical"

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            RecordingOutput("rec", min_level="verbose")

    def test_inverted_range_raises(self):
        with pytest.raises(ValueError):
            RecordingOutput("rec", min_level="error", max_level="info")

    def test_single_callback_wrapped(self):
        def cb(message, level):
            return message

        out = RecordingOutput("rec", callbacks=cb)
        assert out.callbacks == [cb]

    def test_base_log_message_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Output("base").log("info", "hello")


class TestThresholds:
    def test_below_min_skipped(self):
        out = RecordingOutput("rec", min_level="info")
        assert out.log("debug", "quiet") is False
        assert out.messages == []

    def test_above_max_skipped(self):
        out = RecordingOutput("rec", min_level="info", max_level="warning")
        assert out.log("error", "too loud") is False
        assert out.log("warning", "ok") is True
        assert out.messages == ["ok"]

    def test_unknown_record_level_skipped(self):
        out = RecordingOutput("rec")
        assert out.log("trace", "what") is False
        assert out.messages == []


class TestCallbacks:
    def test_chain_runs_in_order_once(self):
        calls = []

        def upper(message, level):
            calls.append("upper")
            return message.upper()

        def tag(message, level):
            calls.append("tag")
            return f"[{level}] {message}\n"

        out = RecordingOutput("rec", callbacks=[upper, tag])
        out.log("warn", "disk low")
        assert out.messages == ["[warning] DISK LOW\n"]
        assert calls == ["upper", "tag"]

    def test_not_run_for_rejected_records(self):
        calls = []
        out = RecordingOutput("rec", min_level="error", callbacks=lambda message, level: calls.append(1))
        out.log("info", "skip me")
        assert calls == []
