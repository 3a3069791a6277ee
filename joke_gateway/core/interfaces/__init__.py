"""
Service interfaces/protocols for dependency injection.

This module defines abstract protocols that services must implement,
following the Dependency Inversion Principle (DIP).
"""

from typing import Protocol

from joke_gateway.core.schemas import NamePair


class NameProvider(Protocol):
    """Source of random person names."""

    async def fetch_random_name(self) -> NamePair:
        """Return a fresh first/last name pair."""
        ...


class JokeProvider(Protocol):
    """Source of jokes personalised with a name."""

    async def fetch_joke(self, first_name: str, last_name: str) -> str:
        """Return joke text with the given name substituted in."""
        ...


__all__ = ["JokeProvider", "NameProvider"]
