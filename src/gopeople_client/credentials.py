"""Carrier credentials and the environment-backed provider."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from gopeople_client.config import GoPeopleSettings
from gopeople_client.exceptions import (
    ConfigurationError,
    MissingConfigurationError,
)
from gopeople_client.protocols import CredentialProvider
from gopeople_client.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    """Carrier base URL and API key.

    Validates the ``{"host": ..., "key": ...}`` shape stored by the
    credential store as well as direct construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: str = Field(min_length=1)
    api_key: str = Field(alias="key")


async def resolve_credentials(
    provider: CredentialProvider,
) -> Result[Credentials]:
    """Resolve host then key; the first failure is returned unchanged."""
    host = await provider.resolve_host()
    if isinstance(host, Err):
        return host
    key = await provider.resolve_key()
    if isinstance(key, Err):
        return key
    try:
        return Ok(Credentials(host=host.value, api_key=key.value))
    except PydanticValidationError as exc:
        return Err(ConfigurationError(f"Invalid carrier credentials: {exc}"))


class EnvCredentialProvider:
    """Credentials from ``GOPEOPLE_HOST`` and ``GOPEOPLE_KEY``.

    Values are read once, when the provider is created.
    Implements the CredentialProvider protocol.
    """

    def __init__(self, settings: GoPeopleSettings | None = None) -> None:
        settings = settings or GoPeopleSettings()
        self._host = settings.host
        self._key = settings.key
        if self._host is None or self._key is None:
            logger.warning("GoPeople credentials missing from environment")

    async def resolve_host(self) -> Result[str]:
        if self._host is None:
            return Err(
                MissingConfigurationError(
                    "No env variable 'GOPEOPLE_HOST' available"
                )
            )
        return Ok(self._host)

    async def resolve_key(self) -> Result[str]:
        if self._key is None:
            return Err(
                MissingConfigurationError(
                    "No env variable 'GOPEOPLE_KEY' available"
                )
            )
        return Ok(self._key)
