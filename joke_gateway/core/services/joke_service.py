"""Client for the personalised joke service."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from joke_gateway.core.exceptions import RemoteCallError
from joke_gateway.core.schemas import JokePayload
from joke_gateway.core.services.upstream import UpstreamServiceClient

logger = logging.getLogger(__name__)


class JokeServiceClient(UpstreamServiceClient):
    """
    Fetches a joke about a given person.

    The name goes out as ``firstName``/``lastName`` query parameters, merged
    with any query string already present on the configured URL, so filters
    such as ``limitTo=nerdy`` reach the service. Earlier deployments replaced
    the configured query string with the name parameters, which silently
    dropped those filters.
    """

    SERVICE_NAME = "joke service"

    async def fetch_joke(self, first_name: str, last_name: str) -> str:
        payload = await self._get_json(
            params={"firstName": first_name, "lastName": last_name}
        )

        try:
            joke = JokePayload.model_validate(payload)
        except ValidationError as exc:
            raise RemoteCallError(
                self.SERVICE_NAME, f"unexpected response shape: {exc.errors()}"
            ) from exc

        logger.debug("Received joke about %s %s", first_name, last_name)
        return joke.value.joke
