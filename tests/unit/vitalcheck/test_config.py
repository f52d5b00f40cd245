"""
Tests for configuration management in `vitalcheck/config.py`.

Covers:
- Environment parsing and debug defaults
- Logging level coercion to the expected Literal
- Alert sink parsing
- get_config cache behavior
- AppConfig validation (debug only in development, real sink in production)
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from vitalcheck.config import (
    AlertConfig,
    AppConfig,
    LoggingConfig,
    get_config,
    load_config_from_env,
)


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    """Ensure get_config cache is cleared before and after each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "LOG_LEVEL", "ALERT_SINK", "ALERT_SOURCE_NAME"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_dev_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "dev")

    config = load_config_from_env()

    assert config.environment == "development"
    assert config.debug is True
    assert config.logging.format == "console"
    assert config.logging.level == "INFO"
    assert config.alerts.sink == "log"
    assert config.alerts.source_name == "vitalcheck"


def test_unknown_environment_is_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod-eu")

    config = load_config_from_env()

    assert config.environment == "production"
    assert config.debug is False
    assert config.logging.format == "json"


def test_logging_level_literal_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")

    # Unknown level should coerce to INFO
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    config = load_config_from_env()
    assert config.logging.level == "INFO"

    # Known level should pass through
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = load_config_from_env()
    assert config.logging.level == "DEBUG"


def test_alert_sink_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    monkeypatch.setenv("ALERT_SINK", " Console ")
    assert load_config_from_env().alerts.sink == "console"

    monkeypatch.setenv("ALERT_SINK", "pager")
    assert load_config_from_env().alerts.sink == "log"

    monkeypatch.setenv("ALERT_SINK", "counting")
    monkeypatch.setenv("ALERT_SOURCE_NAME", "ward-7")
    config = load_config_from_env()
    assert config.alerts.sink == "counting"
    assert config.alerts.source_name == "ward-7"


def test_counting_sink_rejected_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALERT_SINK", "counting")

    with pytest.raises(ValueError, match="counting alert sink is not allowed"):
        load_config_from_env()


def test_get_config_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2  # same object due to lru_cache


def test_app_config_debug_only_in_dev_validation() -> None:
    with pytest.raises(ValueError, match="debug mode is only allowed"):
        AppConfig(
            environment="production",
            debug=True,
            alerts=AlertConfig(),
            logging=LoggingConfig(),
        )


def test_alert_config_rejects_unknown_sink() -> None:
    with pytest.raises(ValueError):
        AlertConfig(sink="sms")  # type: ignore[arg-type]
