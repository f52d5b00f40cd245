"""
Tests for alert sinks in `vitalcheck/services/alerts.py`.

Covers:
- CountingAlertSink counting, history and reset
- LoggingAlertSink structured events
- ConsoleAlertSink output
- build_alert_sink selection from configuration
"""

import io

from rich.console import Console
from structlog.testing import capture_logs

from vitalcheck.config import AlertConfig
from vitalcheck.services.alerts import (
    ConsoleAlertSink,
    CountingAlertSink,
    LoggingAlertSink,
    build_alert_sink,
)


class TestCountingAlertSink:
    def test_starts_at_zero(self) -> None:
        sink = CountingAlertSink()

        assert sink.count == 0
        assert sink.messages == []

    def test_counts_and_remembers_messages(self) -> None:
        sink = CountingAlertSink()

        sink.raise_alert("first")
        sink.raise_alert("second")

        assert sink.count == 2
        assert sink.messages == ["first", "second"]

    def test_reset(self) -> None:
        sink = CountingAlertSink()
        sink.raise_alert("first")

        sink.reset()

        assert sink.count == 0
        assert sink.messages == []

    def test_messages_is_a_copy(self) -> None:
        sink = CountingAlertSink()
        sink.raise_alert("first")

        sink.messages.append("tampered")

        assert sink.messages == ["first"]


def test_logging_sink_emits_warning_event() -> None:
    with capture_logs() as logs:
        sink = LoggingAlertSink(source="ward-7")
        sink.raise_alert("Temperature is critical!")

    assert logs == [
        {
            "component": "alert_sink",
            "source": "ward-7",
            "message": "Temperature is critical!",
            "event": "vital_alert",
            "log_level": "warning",
        }
    ]


def test_console_sink_prints_alert() -> None:
    buffer = io.StringIO()
    sink = ConsoleAlertSink(Console(file=buffer, width=120))

    sink.raise_alert("Pulse Rate is out of range!")

    assert "*** ALERT: Pulse Rate is out of range! ***" in buffer.getvalue()


def test_build_alert_sink_selects_configured_kind() -> None:
    assert isinstance(build_alert_sink(AlertConfig(sink="counting")), CountingAlertSink)
    assert isinstance(build_alert_sink(AlertConfig(sink="console")), ConsoleAlertSink)

    log_sink = build_alert_sink(AlertConfig(sink="log", source_name="icu"))
    assert isinstance(log_sink, LoggingAlertSink)
