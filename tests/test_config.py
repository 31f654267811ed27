"""Tests for settings."""

import logging

from nutrition_engine.config import Settings, parse_log_level


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("NUTRITION_DEFAULT_CALORIE_TARGET", "1800")
    monkeypatch.setenv("NUTRITION_DEBUG", "true")

    settings = Settings()

    assert settings.default_calorie_target == 1800
    assert settings.debug is True


def test_parse_log_level() -> None:
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level(" debug ") == logging.DEBUG
    assert parse_log_level("30") == logging.WARNING
    assert parse_log_level("chatty") == logging.INFO
