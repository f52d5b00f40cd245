"""
Vitals evaluation: pure range predicates and alerting checks.

Two modes over the same fixed range rules:
- Pure checks (`*_in_range`, `all_vitals_in_range`) never raise alerts and
  never touch shared state.
- Alerting checks (`is_*_ok`, `vitals_ok`) raise one alert per out-of-range
  vital on an injected sink.

The aggregate check evaluates every vital before combining results. A patient
with several problems gets one alert per problem in a single call; stopping at
the first failing vital would drop the rest.
"""

from vitalcheck.domain.models import (
    PULSE_RATE_RULE,
    RANGE_RULES,
    SPO2_RULE,
    TEMPERATURE_RULE,
    RangeRule,
    VitalReading,
    VitalSign,
    VitalsAssessment,
)
from vitalcheck.services.alerts import AlertSink, CountingAlertSink, logger


def temperature_in_range(temperature: float) -> bool:
    return TEMPERATURE_RULE.contains(temperature)


def pulse_in_range(pulse_rate: float) -> bool:
    return PULSE_RATE_RULE.contains(pulse_rate)


def spo2_in_range(spo2: float) -> bool:
    return SPO2_RULE.contains(spo2)


def all_vitals_in_range(temperature: float, pulse_rate: float, spo2: float) -> bool:
    """Pure aggregate check. Never raises alerts."""
    return temperature_in_range(temperature) and pulse_in_range(pulse_rate) and spo2_in_range(spo2)


class VitalsEvaluator:
    """
    Stateless evaluator parameterized by an alert sink.

    The sink is the only collaborator; the evaluator never inspects what it
    does with an alert.
    """

    def __init__(self, sink: AlertSink | None = None) -> None:
        self.sink: AlertSink = sink if sink is not None else CountingAlertSink()
        self.logger = logger.bind(component="vitals_evaluator")

    # Pure predicates

    @staticmethod
    def temperature_in_range(temperature: float) -> bool:
        return temperature_in_range(temperature)

    @staticmethod
    def pulse_in_range(pulse_rate: float) -> bool:
        return pulse_in_range(pulse_rate)

    @staticmethod
    def spo2_in_range(spo2: float) -> bool:
        return spo2_in_range(spo2)

    @staticmethod
    def all_vitals_in_range(temperature: float, pulse_rate: float, spo2: float) -> bool:
        return all_vitals_in_range(temperature, pulse_rate, spo2)

    # Alerting checks

    def is_temperature_ok(self, temperature: float) -> bool:
        return self._check(TEMPERATURE_RULE, temperature)

    def is_pulse_rate_ok(self, pulse_rate: float) -> bool:
        return self._check(PULSE_RATE_RULE, pulse_rate)

    def is_spo2_ok(self, spo2: float) -> bool:
        return self._check(SPO2_RULE, spo2)

    def vitals_ok(self, temperature: float, pulse_rate: float, spo2: float) -> bool:
        """
        Alerting aggregate check.

        All three checks run unconditionally; combining them with `and` in a
        single expression would skip the alerts after the first failure.
        """
        temperature_ok = self.is_temperature_ok(temperature)
        pulse_rate_ok = self.is_pulse_rate_ok(pulse_rate)
        spo2_ok = self.is_spo2_ok(spo2)

        self.logger.debug(
            "vitals_evaluated",
            temperature_ok=temperature_ok,
            pulse_rate_ok=pulse_rate_ok,
            spo2_ok=spo2_ok,
        )
        return temperature_ok and pulse_rate_ok and spo2_ok

    def assess(self, reading: VitalReading) -> VitalsAssessment:
        """Alerting check over a reading, reporting which vitals failed."""
        violations: list[VitalSign] = []
        alerts_raised = 0

        for rule in RANGE_RULES:
            value = reading.value_of(rule.vital)
            if rule.contains(value):
                continue
            violations.append(rule.vital)
            self._log_violation(rule, value)
            if self._dispatch(rule):
                alerts_raised += 1

        return VitalsAssessment(
            ok=not violations, violations=violations, alerts_raised=alerts_raised
        )

    def _check(self, rule: RangeRule, value: float) -> bool:
        if rule.contains(value):
            return True
        self._log_violation(rule, value)
        self._dispatch(rule)
        return False

    def _log_violation(self, rule: RangeRule, value: float) -> None:
        self.logger.warning(
            "vital_out_of_range",
            vital=rule.vital.value,
            value=value,
            lower=rule.lower,
            upper=rule.upper,
            unit=rule.unit,
        )

    def _dispatch(self, rule: RangeRule) -> bool:
        """Raise the rule's alert. A failing sink is logged, never propagated."""
        try:
            self.sink.raise_alert(rule.alert_message)
        except Exception as e:
            self.logger.error(
                "alert_dispatch_failed",
                error=str(e),
                vital=rule.vital.value,
                sink=type(self.sink).__name__,
            )
            return False
        return True


# Process-wide evaluator backing the module-level functions below
_default_sink = CountingAlertSink()
_default_evaluator = VitalsEvaluator(_default_sink)


def get_default_evaluator() -> VitalsEvaluator:
    return _default_evaluator


def is_temperature_ok(temperature: float) -> bool:
    return _default_evaluator.is_temperature_ok(temperature)


def is_pulse_rate_ok(pulse_rate: float) -> bool:
    return _default_evaluator.is_pulse_rate_ok(pulse_rate)


def is_spo2_ok(spo2: float) -> bool:
    return _default_evaluator.is_spo2_ok(spo2)


def vitals_ok(temperature: float, pulse_rate: float, spo2: float) -> bool:
    return _default_evaluator.vitals_ok(temperature, pulse_rate, spo2)


def reset_alert_count() -> None:
    _default_sink.reset()


def get_alert_count() -> int:
    return _default_sink.count
