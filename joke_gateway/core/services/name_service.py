"""Client for the random name service."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from joke_gateway.core.exceptions import RemoteCallError
from joke_gateway.core.schemas import NamePair
from joke_gateway.core.services.upstream import UpstreamServiceClient

logger = logging.getLogger(__name__)


class NameServiceClient(UpstreamServiceClient):
    """Fetches a random first/last name pair."""

    SERVICE_NAME = "name service"

    async def fetch_random_name(self) -> NamePair:
        """
        Get a random name.

        Returns:
            NamePair exactly as sent by the service

        Raises:
            RemoteCallError: on network failure, timeout, non-2xx status or
                a body without string ``first_name``/``last_name`` fields
            ConfigurationError: when the configured URL cannot be used
        """
        payload = await self._get_json()

        try:
            name = NamePair.model_validate(payload)
        except ValidationError as exc:
            raise RemoteCallError(
                self.SERVICE_NAME, f"unexpected response shape: {exc.errors()}"
            ) from exc

        logger.debug("Received name: %s", name.full_name)
        return name
