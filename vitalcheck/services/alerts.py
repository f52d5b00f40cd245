"""
Alert sinks for out-of-range vitals.

The evaluator only knows the `AlertSink` protocol. Which sink is installed
(counting for tests, logging or console for deployments) never changes the
evaluator's verdicts.
"""

import threading
from typing import TYPE_CHECKING, Protocol

import structlog
from rich.console import Console

if TYPE_CHECKING:
    from vitalcheck.config import AlertConfig

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


class AlertSink(Protocol):
    """
    Capability to raise a human-readable alert.

    Why Protocol over ABC: any object with `raise_alert` can be injected,
    including test doubles.
    """

    def raise_alert(self, message: str) -> None: ...


class CountingAlertSink:
    """
    Counts alerts instead of notifying anyone.

    Increments and resets are serialized, so one sink can be shared by
    evaluators running on several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0
        self._messages: list[str] = []

    def raise_alert(self, message: str) -> None:
        with self._lock:
            self._count += 1
            self._messages.append(message)

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def messages(self) -> list[str]:
        """Messages raised since the last reset, oldest first."""
        with self._lock:
            return list(self._messages)

    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._messages.clear()


class LoggingAlertSink:
    """Emits each alert as a structured warning event."""

    def __init__(self, source: str = "vitalcheck") -> None:
        self.logger = logger.bind(component="alert_sink", source=source)

    def raise_alert(self, message: str) -> None:
        self.logger.warning("vital_alert", message=message)


class ConsoleAlertSink:
    """Development sink that prints alerts to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def raise_alert(self, message: str) -> None:
        self.console.print(f"*** ALERT: {message} ***", style="bold red", markup=False)


def build_alert_sink(config: "AlertConfig") -> AlertSink:
    """Create the sink selected in configuration."""
    if config.sink == "counting":
        return CountingAlertSink()
    if config.sink == "console":
        return ConsoleAlertSink()
    if config.sink == "log":
        return LoggingAlertSink(source=config.source_name)
    raise ValueError(f"Unknown alert sink: {config.sink}")
