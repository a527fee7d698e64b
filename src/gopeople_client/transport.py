"""JSON-over-HTTP transport for carrier requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from gopeople_client import __version__
from gopeople_client.config import GoPeopleSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarrierRequest:
    """One request to the carrier, independent of any HTTP library."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json_body: dict[str, Any] | None = None


def build_async_client(
    settings: GoPeopleSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with timeout and default headers."""
    settings = settings or GoPeopleSettings()
    headers = {
        "User-Agent": f"gopeople-client/{__version__}",
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers=headers,
    )


class HttpxTransport:
    """Transport backed by httpx.

    Uses ``client`` when given (the caller owns its lifecycle); otherwise
    opens and closes a client per request. Implements the Transport
    protocol.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: GoPeopleSettings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings

    async def send(self, request: CarrierRequest) -> Any:
        if self._client is not None:
            return await self._send(self._client, request)
        async with build_async_client(self._settings) as client:
            return await self._send(client, request)

    async def _send(
        self, client: httpx.AsyncClient, request: CarrierRequest
    ) -> Any:
        logger.debug("%s %s", request.method, request.url)
        response = await client.request(
            request.method,
            request.url,
            headers=request.headers,
            json=request.json_body,
        )
        response.raise_for_status()
        return response.json()
