"""
FastAPI dependencies for dependency injection.

Provides easy integration between FastAPI's dependency system
and the application's DI container. Tests replace the provider
dependencies through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from joke_gateway.core.container import Container, get_container
from joke_gateway.core.interfaces import JokeProvider, NameProvider
from joke_gateway.core.use_cases.tell_joke_use_case import TellJokeUseCase


def get_name_provider(
    container: Annotated[Container, Depends(get_container)],
) -> NameProvider:
    """Get the name service client."""
    return container.name_service()


def get_joke_provider(
    container: Annotated[Container, Depends(get_container)],
) -> JokeProvider:
    """Get the joke service client."""
    return container.joke_service()


def get_tell_joke_use_case(
    name_provider: Annotated[NameProvider, Depends(get_name_provider)],
    joke_provider: Annotated[JokeProvider, Depends(get_joke_provider)],
) -> TellJokeUseCase:
    """Get TellJokeUseCase instance wired to the current providers."""
    return TellJokeUseCase(
        name_provider=name_provider,
        joke_provider=joke_provider,
    )
