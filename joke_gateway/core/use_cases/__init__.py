"""Use cases for business logic orchestration."""

from joke_gateway.core.use_cases.tell_joke_use_case import TellJokeUseCase

__all__ = [
    "TellJokeUseCase",
]
