"""Environment configuration for Joke Gateway."""

from __future__ import annotations

import os
from functools import lru_cache
from urllib.parse import urlsplit

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from joke_gateway.core.exceptions import ConfigurationError

load_dotenv()

DEFAULT_NAME_SERVICE_URL = "https://names.mcquay.me/api/v0/"
DEFAULT_JOKE_SERVICE_URL = "http://joke.loc8u.com:8888/joke?limitTo=nerdy"
DEFAULT_UPSTREAM_TIMEOUT = 30.0


def _bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _validate_http_url(name: str, url: str) -> None:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise ValueError(f"{name} is not a valid URL: {exc}") from exc
    if parts.scheme not in {"http", "https"}:
        raise ValueError(f"{name} must start with http:// or https://")
    if not parts.hostname:
        raise ValueError(f"{name} must include a host")


class AppSettings(BaseModel):
    name: str = Field(
        default_factory=lambda: os.getenv("APP_NAME", "Joke Gateway").strip()
        or "Joke Gateway"
    )
    version: str = Field(
        default_factory=lambda: os.getenv("APP_VERSION", "0.1.0").strip() or "0.1.0"
    )
    debug: bool = Field(default_factory=lambda: _bool_env("DEBUG", False))
    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").strip().upper()
    )

    @model_validator(mode="after")
    def _validate(self) -> "AppSettings":
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(
                "LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return self


class ServerSettings(BaseModel):
    host: str = Field(
        default_factory=lambda: os.getenv("HOST", "127.0.0.1").strip() or "127.0.0.1"
    )
    port: int = Field(default_factory=lambda: _int_env("PORT", 3000))
    disconnect_poll_interval: float = Field(
        default_factory=lambda: _float_env("DISCONNECT_POLL_INTERVAL", 0.25)
    )

    @model_validator(mode="after")
    def _validate(self) -> "ServerSettings":
        if not 0 < self.port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        if self.disconnect_poll_interval <= 0:
            raise ValueError("DISCONNECT_POLL_INTERVAL must be positive")
        return self


class NameServiceSettings(BaseModel):
    url: str = Field(
        default_factory=lambda: os.getenv("NAME_SERVICE_URL", DEFAULT_NAME_SERVICE_URL).strip()
    )
    timeout: float = Field(
        default_factory=lambda: _float_env("NAME_SERVICE_TIMEOUT", DEFAULT_UPSTREAM_TIMEOUT)
    )

    @model_validator(mode="after")
    def _validate(self) -> "NameServiceSettings":
        _validate_http_url("NAME_SERVICE_URL", self.url)
        if self.timeout <= 0:
            raise ValueError("NAME_SERVICE_TIMEOUT must be positive")
        return self


class JokeServiceSettings(BaseModel):
    url: str = Field(
        default_factory=lambda: os.getenv("JOKE_SERVICE_URL", DEFAULT_JOKE_SERVICE_URL).strip()
    )
    timeout: float = Field(
        default_factory=lambda: _float_env("JOKE_SERVICE_TIMEOUT", DEFAULT_UPSTREAM_TIMEOUT)
    )

    @model_validator(mode="after")
    def _validate(self) -> "JokeServiceSettings":
        _validate_http_url("JOKE_SERVICE_URL", self.url)
        if self.timeout <= 0:
            raise ValueError("JOKE_SERVICE_TIMEOUT must be positive")
        return self


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    name_service: NameServiceSettings = Field(default_factory=NameServiceSettings)
    joke_service: JokeServiceSettings = Field(default_factory=JokeServiceSettings)

    model_config = dict(extra="ignore")

    # Compatibility helpers -------------------------------------------------
    @property
    def app_name(self) -> str:
        return self.app.name

    @property
    def app_version(self) -> str:
        return self.app.version

    @property
    def debug(self) -> bool:
        return self.app.debug

    @property
    def log_level(self) -> str:
        return self.app.log_level

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
