"""Clients for the upstream name and joke services."""

from joke_gateway.core.services.joke_service import JokeServiceClient
from joke_gateway.core.services.name_service import NameServiceClient

__all__ = [
    "JokeServiceClient",
    "NameServiceClient",
]
