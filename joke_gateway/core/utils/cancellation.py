"""Tie the lifetime of request work to the client connection."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Protocol, TypeVar

from joke_gateway.core.exceptions import RequestAbandonedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DisconnectAware(Protocol):
    async def is_disconnected(self) -> bool: ...


async def cancel_on_disconnect(
    request: DisconnectAware,
    work: Awaitable[T],
    poll_interval: float = 0.25,
) -> T:
    """
    Await ``work`` unless the client goes away first.

    The client connection is checked every ``poll_interval`` seconds. On
    disconnect the work is cancelled, which also cancels any outbound HTTP
    call it is awaiting, and RequestAbandonedError is raised. Exceptions
    raised by ``work`` propagate unchanged.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling in-flight work")
                task.cancel()
                await asyncio.wait({task})
                raise RequestAbandonedError("client disconnected before response was ready")
    finally:
        if not task.done():
            task.cancel()
