"""Tests for settings."""

from config.settings import Settings


def test_defaults_point_at_local_server(monkeypatch):
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_base_url == "http://localhost:2100"
    assert settings.request_timeout is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://albook.lan:8080/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    settings = Settings(_env_file=None)
    assert settings.api_root == "http://albook.lan:8080"
    assert settings.request_timeout == 2.5
