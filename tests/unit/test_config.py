"""Unit tests for environment configuration."""

import pytest

from joke_gateway.core.config import (
    DEFAULT_JOKE_SERVICE_URL,
    DEFAULT_NAME_SERVICE_URL,
    Settings,
    get_settings,
)
from joke_gateway.core.exceptions import ConfigurationError

ENV_VARS = [
    "APP_NAME",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "DISCONNECT_POLL_INTERVAL",
    "NAME_SERVICE_URL",
    "NAME_SERVICE_TIMEOUT",
    "JOKE_SERVICE_URL",
    "JOKE_SERVICE_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.mark.unit
def test_defaults_bind_loopback_port_3000(clean_env):
    settings = Settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 3000
    assert settings.name_service.url == DEFAULT_NAME_SERVICE_URL
    assert settings.joke_service.url == DEFAULT_JOKE_SERVICE_URL
    assert settings.name_service.timeout == 30.0
    assert settings.joke_service.timeout == 30.0
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_environment_overrides(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("NAME_SERVICE_URL", "https://names.internal/random")
    clean_env.setenv("JOKE_SERVICE_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.name_service.url == "https://names.internal/random"
    assert settings.joke_service.timeout == 2.5


@pytest.mark.unit
def test_unparseable_numbers_fall_back_to_defaults(clean_env):
    clean_env.setenv("PORT", "three thousand")
    clean_env.setenv("NAME_SERVICE_TIMEOUT", "soon")

    settings = Settings()

    assert settings.port == 3000
    assert settings.name_service.timeout == 30.0


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,value",
    [
        ("NAME_SERVICE_URL", "names.mcquay.me/api/v0/"),
        ("NAME_SERVICE_URL", "ftp://names.example/"),
        ("JOKE_SERVICE_URL", "http:///joke"),
        ("JOKE_SERVICE_URL", "http://[bad/joke"),
        ("JOKE_SERVICE_TIMEOUT", "0"),
        ("LOG_LEVEL", "LOUD"),
        ("PORT", "70000"),
    ],
)
def test_invalid_settings_raise_configuration_error(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        get_settings()
