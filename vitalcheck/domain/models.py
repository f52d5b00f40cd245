"""
Domain models for patient vitals range checking.

These models represent the core clinical concepts and are framework-agnostic.
Range rules are fixed constants: every evaluation uses the same bounds.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VitalSign(str, Enum):
    """Vital signs checked by the evaluator."""

    TEMPERATURE = "temperature"
    PULSE_RATE = "pulse_rate"
    SPO2 = "spo2"


class RangeRule(BaseModel):
    """Closed interval, or one-sided bound, that a vital must fall within."""

    model_config = ConfigDict(frozen=True)

    vital: VitalSign
    lower: float | None = Field(default=None, description="Inclusive lower bound")
    upper: float | None = Field(default=None, description="Inclusive upper bound")
    unit: str
    alert_message: str = Field(min_length=1)

    def contains(self, value: float) -> bool:
        """True iff value lies within the inclusive bounds. NaN is never contained."""
        if self.lower is not None and not value >= self.lower:
            return False
        if self.upper is not None and not value <= self.upper:
            return False
        return True


TEMPERATURE_RULE = RangeRule(
    vital=VitalSign.TEMPERATURE,
    lower=95.0,
    upper=102.0,
    unit="fahrenheit",
    alert_message="Temperature is critical!",
)
PULSE_RATE_RULE = RangeRule(
    vital=VitalSign.PULSE_RATE,
    lower=60.0,
    upper=100.0,
    unit="beats_per_minute",
    alert_message="Pulse Rate is out of range!",
)
SPO2_RULE = RangeRule(
    vital=VitalSign.SPO2,
    lower=90.0,
    unit="percent",
    alert_message="Oxygen Saturation out of range!",
)

# Evaluation order for aggregate checks
RANGE_RULES: tuple[RangeRule, ...] = (TEMPERATURE_RULE, PULSE_RATE_RULE, SPO2_RULE)


class VitalReading(BaseModel):
    """One set of measurements for a patient."""

    model_config = ConfigDict(frozen=True)  # Readings are facts, never edited

    temperature: float = Field(description="Body temperature in degrees Fahrenheit")
    pulse_rate: float = Field(description="Pulse rate in beats per minute")
    spo2: float = Field(description="Blood oxygen saturation in percent")

    def value_of(self, vital: VitalSign) -> float:
        return float(getattr(self, vital.value))


class VitalsAssessment(BaseModel):
    """Outcome of an alerting evaluation of one reading."""

    ok: bool
    violations: list[VitalSign] = Field(default_factory=list)
    alerts_raised: int = Field(ge=0, description="Alerts raised during this evaluation")
    assessed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
