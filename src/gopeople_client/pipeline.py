"""Credential-aware request pipeline shared by every carrier operation.

Stages run in order and stop at the first failure:

1. resolve credentials from the provider;
2. validate inputs and build the request body (``prepare``);
3. build the request;
4. send it through the transport;
5. decode the carrier envelope.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode

from gopeople_client.credentials import Credentials, resolve_credentials
from gopeople_client.exceptions import TransportError
from gopeople_client.protocols import CredentialProvider, Transport
from gopeople_client.result import Err, Result
from gopeople_client.transport import CarrierRequest, HttpxTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Body = dict[str, Any] | None


@dataclass(frozen=True)
class Operation(Generic[T]):
    """A carrier endpoint and the decoder for its responses."""

    method: str
    path: str
    decoder: Callable[[Any], Result[T]]


def build_request(
    operation: Operation[Any],
    credentials: Credentials,
    body: Body = None,
    query: dict[str, str] | None = None,
) -> CarrierRequest:
    url = f"{credentials.host}{operation.path}"
    if query:
        url = f"{url}?{urlencode(query)}"
    return CarrierRequest(
        method=operation.method,
        url=url,
        headers={"Authorization": f"bearer {credentials.api_key}"},
        json_body=body,
    )


async def run_pipeline(
    operation: Operation[T],
    provider: CredentialProvider,
    *,
    prepare: Callable[[], Result[Body]] | None = None,
    query: dict[str, str] | None = None,
    transport: Transport | None = None,
) -> Result[T]:
    """Run one operation end to end.

    Args:
        operation: Endpoint and response decoder.
        provider: Source of the carrier host and API key.
        prepare: Validates inputs and returns the JSON body. Omitted for
            operations without a body.
        query: Query string parameters appended to the path.
        transport: Sends the request. Defaults to a new HttpxTransport.

    Returns:
        ``Ok`` with the decoded value, or ``Err`` with the error of the
        first stage that failed.
    """
    credentials = await resolve_credentials(provider)
    if isinstance(credentials, Err):
        return credentials

    body: Body = None
    if prepare is not None:
        prepared = prepare()
        if isinstance(prepared, Err):
            logger.debug(
                "%s %s rejected before sending: %s",
                operation.method,
                operation.path,
                prepared.error,
            )
            return prepared
        body = prepared.value

    request = build_request(operation, credentials.value, body, query)
    transport = transport or HttpxTransport()
    try:
        payload = await transport.send(request)
    except Exception as exc:
        logger.warning(
            "%s %s failed: %s", operation.method, operation.path, exc
        )
        return Err(TransportError(operation.path, exc))

    return operation.decoder(payload)
