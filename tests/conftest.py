"""
Pytest configuration and helpers for the Joke Gateway test-suite.

Upstream URLs point at hosts that never resolve, and the FastAPI provider
dependencies are overridden with in-memory doubles, so no test reaches the
network. Lifespan start-up is skipped by the ASGI transport.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Environment bootstrap
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

NAME_SERVICE_URL = "http://names.test/api/v0/"
JOKE_SERVICE_URL = "http://jokes.test/joke?limitTo=nerdy"

os.environ["NAME_SERVICE_URL"] = NAME_SERVICE_URL
os.environ["JOKE_SERVICE_URL"] = JOKE_SERVICE_URL
os.environ["NAME_SERVICE_TIMEOUT"] = "5"
os.environ["JOKE_SERVICE_TIMEOUT"] = "5"
os.environ["DISCONNECT_POLL_INTERVAL"] = "0.05"
os.environ["LOG_LEVEL"] = "DEBUG"

from joke_gateway.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from joke_gateway.core.dependencies import (  # noqa: E402
    get_joke_provider,
    get_name_provider,
)
from joke_gateway.main import app  # noqa: E402
from tests.doubles import FakeJokeProvider, FakeNameProvider  # noqa: E402


@pytest.fixture
def name_provider() -> FakeNameProvider:
    return FakeNameProvider()


@pytest.fixture
def joke_provider() -> FakeJokeProvider:
    return FakeJokeProvider()


# ---------------------------------------------------------------------------
# Dependency overrides
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def override_dependencies(
    name_provider: FakeNameProvider, joke_provider: FakeJokeProvider
) -> Generator[None, None, None]:
    """Override FastAPI dependencies so the app uses the provider doubles."""
    app.dependency_overrides[get_name_provider] = lambda: name_provider
    app.dependency_overrides[get_joke_provider] = lambda: joke_provider

    try:
        yield
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTPX client configured for the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http
