import pytest

from piplop_sdk.config import DEFAULT_API_URL, ClientSettings, resolve_settings


def test_defaults():
    settings = resolve_settings()
    assert settings == ClientSettings(api_url=DEFAULT_API_URL, api_key=None)
    assert settings.api_url == "http://localhost:8080"


def test_environment_fallback(monkeypatch):
    monkeypatch.setenv("PIPLOP_API_URL", "https://api.piplop.test")
    monkeypatch.setenv("PIPLOP_API_KEY", "env-key")

    settings = resolve_settings()

    assert settings.api_url == "https://api.piplop.test"
    assert settings.api_key == "env-key"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("PIPLOP_API_URL", "https://api.piplop.test")
    monkeypatch.setenv("PIPLOP_API_KEY", "env-key")

    settings = resolve_settings(api_url="http://127.0.0.1:9000", api_key="cli-key")

    assert settings.api_url == "http://127.0.0.1:9000"
    assert settings.api_key == "cli-key"


def test_empty_key_is_absent(monkeypatch):
    monkeypatch.setenv("PIPLOP_API_KEY", "")
    assert resolve_settings().api_key is None


def test_settings_are_frozen():
    settings = resolve_settings()
    with pytest.raises(AttributeError):
        settings.api_key = "changed"
