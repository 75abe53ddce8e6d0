from __future__ import annotations

import dataclasses

import pytest

from arrkit.config import ClientConfig, Settings, get_settings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARR_URL", "http://radarr:7878")
    monkeypatch.setenv("ARR_API_KEY", "abc123")
    monkeypatch.setenv("ARR_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("ARR_REUSE_CONNECTIONS", "true")

    settings = Settings(_env_file=None)
    config = settings.client_config()
    assert config == ClientConfig(
        url="http://radarr:7878",
        api_key="abc123",
        timeout_seconds=5.0,
        reuse_connections=True,
    )


def test_export_safe_hides_secrets() -> None:
    settings = Settings(api_key="topsecret", http_user="u", http_pass="p", _env_file=None)
    exported = settings.export_safe()
    assert exported["api_key_set"] is True
    assert "topsecret" not in repr(exported)
    assert "http_pass" not in exported


def test_basic_auth_from_settings() -> None:
    config = Settings(http_user="u", http_pass="p", _env_file=None).client_config()
    assert config.basic_auth == ("u", "p")
    assert ClientConfig(url="http://x", api_key="k").basic_auth is None


def test_client_config_is_immutable_and_redacts_key() -> None:
    config = ClientConfig(url="http://x", api_key="very-secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"  # type: ignore[misc]
    assert "very-secret" not in repr(config)


def test_client_config_requires_url() -> None:
    with pytest.raises(ValueError, match="base URL"):
        ClientConfig(url=" ", api_key="k")


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("ARR_URL", "http://cached:1")
    try:
        first = get_settings()
        assert first is get_settings()
        assert first.url == "http://cached:1"
    finally:
        get_settings.cache_clear()
