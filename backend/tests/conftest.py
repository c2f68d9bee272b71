import pytest

from call_alerts.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings."""
    for name in ("CALL_ALERTS_WINDOW_LENGTH", "CALL_ALERTS_THRESHOLD", "CALL_ALERTS_SAMPLES", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def example_calls():
    return [2, 2, 2, 2, 5, 5, 5, 8]
