import pytest

from crumb_core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in ("CRUMB_UNIT", "CRUMB_PROFILE", "LOG_LEVEL", "ENVIRONMENT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.unit == "metric"
    assert settings.profile == "detailed"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["http://localhost:3000", "http://localhost:5173"]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CRUMB_UNIT", "Imperial")
    monkeypatch.setenv("CRUMB_PROFILE", "bogus")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, ,https://b.example")

    settings = get_settings()
    assert settings.unit == "imperial"
    assert settings.profile == "detailed"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_settings_are_cached():
    assert get_settings() is get_settings()
