"""ASGI middleware binding a trace id to each HTTP request."""

import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from joke_gateway.core.logging_config import trace_id_ctx

TRACE_HEADER = "X-Trace-Id"


class TraceIdMiddleware:
    """
    Attach a trace id to the request, its log records and its response.

    The id comes from the ``X-Trace-Id`` request header or is generated. It
    is stored in ``trace_id_ctx`` for the duration of the request and echoed
    back on the response. ``receive`` is passed through untouched so
    handlers can still detect a client disconnect.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        trace_id = Headers(scope=scope).get(TRACE_HEADER) or str(uuid.uuid4())
        scope.setdefault("state", {})["trace_id"] = trace_id

        async def send_with_trace_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[TRACE_HEADER] = trace_id
            await send(message)

        token = trace_id_ctx.set(trace_id)
        try:
            await self.app(scope, receive, send_with_trace_id)
        finally:
            trace_id_ctx.reset(token)
