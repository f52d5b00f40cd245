"""
End-to-end walkthrough of the vitals checker.

This script:
1. Loads and validates configuration
2. Builds the configured alert sink
3. Assesses a set of clinical scenarios
4. Compares each verdict and alert count with the expected outcome

Run with: uv run python demo_vitals.py
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vitalcheck.config import get_config, print_config_summary, validate_config
from vitalcheck.domain.models import VitalReading
from vitalcheck.services.alerts import build_alert_sink
from vitalcheck.services.evaluator import VitalsEvaluator

console = Console()

# (description, temperature, pulse rate, spo2, expected ok, expected alerts)
SCENARIOS: list[tuple[str, float, float, float, bool, int]] = [
    ("Pulse high, SpO2 low", 99, 102, 70, False, 2),
    ("All normal", 98.1, 70, 98, True, 0),
    ("High temperature", 103, 72, 95, False, 1),
    ("Low temperature", 94, 72, 95, False, 1),
    ("High pulse", 98, 110, 95, False, 1),
    ("Low pulse", 98, 55, 95, False, 1),
    ("Low SpO2", 98, 72, 85, False, 1),
    ("All vitals bad", 103, 110, 85, False, 3),
    ("All vitals low", 94, 55, 89, False, 3),
    ("Lower boundaries", 95, 60, 90, True, 0),
    ("Upper boundaries", 102, 100, 90, True, 0),
    ("Just below temperature boundary", 94.9, 60, 90, False, 1),
    ("Just below pulse boundary", 95, 59, 90, False, 1),
    ("Just below SpO2 boundary", 95, 60, 89, False, 1),
]


def run_scenarios(evaluator: VitalsEvaluator) -> int:
    """Assess every scenario and return how many matched expectations."""

    table = Table(title="Vitals Scenarios")
    table.add_column("Scenario", style="cyan")
    table.add_column("Reading", style="magenta")
    table.add_column("Verdict", style="white")
    table.add_column("Alerts", style="yellow")
    table.add_column("Result", style="white")

    passed = 0
    for description, temperature, pulse_rate, spo2, expected_ok, expected_alerts in SCENARIOS:
        reading = VitalReading(temperature=temperature, pulse_rate=pulse_rate, spo2=spo2)
        assessment = evaluator.assess(reading)

        matched = assessment.ok == expected_ok and assessment.alerts_raised == expected_alerts
        passed += matched

        table.add_row(
            description,
            f"{temperature}°F / {pulse_rate} bpm / {spo2}%",
            "OK" if assessment.ok else ", ".join(v.value for v in assessment.violations),
            str(assessment.alerts_raised),
            "✅ PASSED" if matched else "❌ FAILED",
        )

    console.print(table)
    return passed


def main() -> None:
    console.print(Panel("🩺 Vitals Checker - Scenario Walkthrough", style="bold blue"))

    validate_config()
    print_config_summary()

    config = get_config()
    logging.basicConfig(level=config.logging.level)

    evaluator = VitalsEvaluator(build_alert_sink(config.alerts))
    passed = run_scenarios(evaluator)

    console.print(f"\n🎯 Results: {passed}/{len(SCENARIOS)} scenarios matched")
    if passed == len(SCENARIOS):
        console.print("🎉 All scenarios behaved as expected.", style="green")
    else:
        console.print("⚠️  Some scenarios did not match. Check the logs above.", style="yellow")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n👋 Walkthrough stopped by user", style="yellow")
