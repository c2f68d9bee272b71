import logging

import pytest

from call_alerts.config import DEFAULT_SAMPLES, Settings, get_settings, load_settings
from call_alerts.logging import configure_logging


def test_defaults():
    settings = load_settings()
    assert settings.window_length == 3
    assert settings.threshold == 4
    assert settings.samples == DEFAULT_SAMPLES
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CALL_ALERTS_WINDOW_LENGTH", "5")
    monkeypatch.setenv("CALL_ALERTS_THRESHOLD", " 7 ")
    monkeypatch.setenv("CALL_ALERTS_SAMPLES", "1, 2 3")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

    settings = load_settings()
    assert settings.window_length == 5
    assert settings.threshold == 7
    assert settings.samples == (1, 2, 3)
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_bad_integer(monkeypatch):
    monkeypatch.setenv("CALL_ALERTS_THRESHOLD", "high")
    with pytest.raises(ValueError, match="CALL_ALERTS_THRESHOLD"):
        load_settings()


def test_bad_samples(monkeypatch):
    monkeypatch.setenv("CALL_ALERTS_SAMPLES", "1,two")
    with pytest.raises(ValueError, match="CALL_ALERTS_SAMPLES"):
        load_settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_level():
    logger = configure_logging(Settings(log_level="debug"))
    assert logger.name == "call_alerts"
    assert logger.level == logging.DEBUG

    logger = configure_logging(Settings(log_level="nonsense"))
    assert logger.level == logging.INFO
