"""
Core services for vitals checking.

This package contains the evaluator and the alert sinks it raises alerts on.
"""

from .alerts import (
    AlertSink,
    ConsoleAlertSink,
    CountingAlertSink,
    LoggingAlertSink,
    build_alert_sink,
)
from .evaluator import (
    VitalsEvaluator,
    all_vitals_in_range,
    get_alert_count,
    get_default_evaluator,
    is_pulse_rate_ok,
    is_spo2_ok,
    is_temperature_ok,
    pulse_in_range,
    reset_alert_count,
    spo2_in_range,
    temperature_in_range,
    vitals_ok,
)

__all__ = [
    "AlertSink",
    "ConsoleAlertSink",
    "CountingAlertSink",
    "LoggingAlertSink",
    "build_alert_sink",
    "VitalsEvaluator",
    "all_vitals_in_range",
    "get_alert_count",
    "get_default_evaluator",
    "is_pulse_rate_ok",
    "is_spo2_ok",
    "is_temperature_ok",
    "pulse_in_range",
    "reset_alert_count",
    "spo2_in_range",
    "temperature_in_range",
    "vitals_ok",
]
