"""Joke endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from joke_gateway.core.config import Settings, get_settings
from joke_gateway.core.dependencies import get_tell_joke_use_case
from joke_gateway.core.exceptions import JokeStageError, RequestAbandonedError
from joke_gateway.core.use_cases.tell_joke_use_case import TellJokeUseCase
from joke_gateway.core.utils.cancellation import cancel_on_disconnect

logger = logging.getLogger(__name__)

# nginx convention for "client closed request"; never reaches the client.
STATUS_CLIENT_CLOSED_REQUEST = 499

router = APIRouter(tags=["jokes"])


@router.get("/", response_class=PlainTextResponse)
async def tell_joke(
    request: Request,
    tell_joke_uc: Annotated[TellJokeUseCase, Depends(get_tell_joke_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Return a joke about a random person as plain text."""
    try:
        joke = await cancel_on_disconnect(
            request,
            tell_joke_uc.execute(),
            poll_interval=settings.server.disconnect_poll_interval,
        )
    except JokeStageError as exc:
        return PlainTextResponse(
            content=exc.public_message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except RequestAbandonedError:
        logger.info("Abandoning response for disconnected client")
        return Response(status_code=STATUS_CLIENT_CLOSED_REQUEST)

    return PlainTextResponse(content=joke, status_code=status.HTTP_200_OK)
