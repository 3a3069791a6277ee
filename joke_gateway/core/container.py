"""
Dependency Injection Container.

Centralizes all dependency configuration following the Dependency Inversion Principle.
This makes the application more testable and maintainable.
"""

import httpx
from dependency_injector import containers, providers

from joke_gateway.core.config import get_settings
from joke_gateway.core.services.joke_service import JokeServiceClient
from joke_gateway.core.services.name_service import NameServiceClient


class Container(containers.DeclarativeContainer):
    """
    Application DI container.

    Provides centralized configuration for all dependencies.
    The HTTP client and both service clients are process-wide singletons.
    """

    # Configuration
    settings = providers.Singleton(get_settings)

    # Infrastructure - Singleton
    # Per-request timeouts are applied by each service client.
    http_client = providers.Singleton(
        httpx.AsyncClient,
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )

    # Services - Singleton (stateless apart from the shared client)
    name_service = providers.Singleton(
        NameServiceClient,
        http_client=http_client,
        url=settings.provided.name_service.url,
        timeout=settings.provided.name_service.timeout,
    )
    joke_service = providers.Singleton(
        JokeServiceClient,
        http_client=http_client,
        url=settings.provided.joke_service.url,
        timeout=settings.provided.joke_service.timeout,
    )


# Global container instance
container = Container()


def get_container() -> Container:
    """
    Get the global container instance.

    Used as a FastAPI dependency:
        container: Container = Depends(get_container)
    """
    return container


async def shutdown_container() -> None:
    """Close the shared HTTP client and clear all singletons."""
    client = container.http_client()
    if not client.is_closed:
        await client.aclose()
    container.reset_singletons()
