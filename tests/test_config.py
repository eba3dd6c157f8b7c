"""Unit tests for hypot.core.config."""

from hypot.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///./hypot.db"
    assert settings.log_level == "INFO"
    assert settings.id_attempts == 16


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://hypot@localhost/hypot")
    monkeypatch.setenv("ID_ATTEMPTS", "4")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql://hypot@localhost/hypot"
    assert settings.id_attempts == 4


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
