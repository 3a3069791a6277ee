"""Shared GET-and-decode logic for upstream JSON services."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from joke_gateway.core.exceptions import ConfigurationError, RemoteCallError

logger = logging.getLogger(__name__)


class UpstreamServiceClient:
    """
    Base class for clients of a single upstream JSON endpoint.

    Every failure to reach the endpoint or decode its body is raised as
    RemoteCallError with the httpx or decode error chained. An endpoint URL
    httpx refuses to use is raised as ConfigurationError.
    """

    SERVICE_NAME = "upstream"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str,
        timeout: float = 30.0,
    ):
        """
        Initialize the upstream client.

        Args:
            http_client: Shared httpx AsyncClient instance
            url: Endpoint URL, may already carry query parameters
            timeout: Request timeout in seconds
        """
        self.http_client = http_client
        self.url = url
        self.timeout = timeout

    async def _get_json(self, params: Optional[Mapping[str, str]] = None) -> Any:
        try:
            response = await self.http_client.get(
                self.url, params=params, timeout=self.timeout
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise ConfigurationError(
                f"{self.SERVICE_NAME} URL {self.url!r} is not usable: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise RemoteCallError(
                self.SERVICE_NAME, f"timed out after {self.timeout}s"
            ) from exc
        except httpx.RequestError as exc:
            raise RemoteCallError(self.SERVICE_NAME, f"request failed: {exc!r}") from exc

        logger.debug(
            "%s responded: status=%s url=%s",
            self.SERVICE_NAME,
            response.status_code,
            response.request.url,
        )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteCallError(
                self.SERVICE_NAME, f"unexpected status {response.status_code}"
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteCallError(
                self.SERVICE_NAME, f"non-JSON response: {response.text[:200]!r}"
            ) from exc
