"""Capability protocols the request pipeline depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gopeople_client.result import Result
    from gopeople_client.transport import CarrierRequest

__all__ = [
    "CredentialProvider",
    "Transport",
]


@runtime_checkable
class CredentialProvider(Protocol):
    """Source of the carrier host and API key.

    Repeated and concurrent calls must be idempotent and side-effect free.
    """

    async def resolve_host(self) -> Result[str]:
        """Return the carrier base URL."""
        ...

    async def resolve_key(self) -> Result[str]:
        """Return the carrier API key."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Sends one JSON request and returns the decoded JSON response.

    Raises on network failure or when the body is not JSON.
    """

    async def send(self, request: CarrierRequest) -> Any:
        ...
