"""ASGI middleware that reports failures writing committed responses."""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from joke_gateway.core.exceptions import ResponseWriteError

logger = logging.getLogger(__name__)


class ResponseWriteGuardMiddleware:
    """
    Log errors raised while sending a response to the client.

    Once the status line has gone out there is nothing left to correct, so a
    failed write is logged as ResponseWriteError and the rest of the response
    is dropped instead of surfacing as an unhandled application error.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        write_failed = False

        async def guarded_send(message: Message) -> None:
            nonlocal write_failed
            if write_failed:
                return
            try:
                await send(message)
            except OSError as exc:
                write_failed = True
                error = ResponseWriteError(
                    f"failed to write {message['type']} for {scope.get('path', '?')}"
                )
                error.__cause__ = exc
                logger.error("%s: %s", error, exc, exc_info=error)

        await self.app(scope, receive, guarded_send)
