"""Exception types shared across Joke Gateway."""

from __future__ import annotations

from enum import Enum


class JokeGatewayError(Exception):
    """Base class for all Joke Gateway errors."""


class ConfigurationError(JokeGatewayError):
    """Raised when settings or an outbound endpoint URL are unusable."""


class RemoteCallError(JokeGatewayError):
    """Raised when an upstream service cannot be reached or its response cannot be parsed."""

    def __init__(self, service: str, message: str):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.message = message


class JokeStage(str, Enum):
    """Stages of a joke request, in execution order."""

    NAME = "name"
    JOKE = "joke"

    @property
    def failure_message(self) -> str:
        return f"failed to get {self.value}"


class JokeStageError(JokeGatewayError):
    """
    Raised when a stage of the joke request fails.

    ``public_message`` is the only text that may reach the client; the
    upstream cause stays on ``__cause__`` for logs.
    """

    def __init__(self, stage: JokeStage):
        super().__init__(stage.failure_message)
        self.stage = stage

    @property
    def public_message(self) -> str:
        return self.stage.failure_message


class RequestAbandonedError(JokeGatewayError):
    """Raised when the client disconnects before the response is ready."""


class ResponseWriteError(JokeGatewayError):
    """Raised when a committed response could not be written to the client."""
