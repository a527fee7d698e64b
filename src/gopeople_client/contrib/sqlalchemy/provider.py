"""SQLAlchemy-backed credential provider with an in-memory cache."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from gopeople_client.config import GoPeopleSettings
from gopeople_client.contrib.sqlalchemy.models import CarrierProviderModel
from gopeople_client.credentials import Credentials
from gopeople_client.exceptions import (
    ConfigurationError,
    CredentialsNotFoundError,
)
from gopeople_client.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# Async drivers raise socket errors on connect without SQLAlchemy wrapping.
STORE_ERRORS = (SQLAlchemyError, OSError)


class SQLAlchemyCredentialProvider:
    """Credentials read from the ``carrier_providers`` table.

    The first successful lookup is cached for the life of the provider and
    later calls do no I/O. Failed lookups are not cached, so a later call
    retries. Two concurrent first calls may both query the store; the last
    one to finish wins, which is harmless as both read the same row.

    Implements the CredentialProvider protocol.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        service_name: str = "gopeople",
    ) -> None:
        self._session_factory = session_factory
        self._service_name = service_name
        self._cache: Credentials | None = None

    @classmethod
    def from_url(
        cls, url: str, service_name: str = "gopeople"
    ) -> SQLAlchemyCredentialProvider:
        # Connections are closed once the lookup is done.
        engine = create_async_engine(url, poolclass=NullPool)
        return cls(
            async_sessionmaker(engine, class_=AsyncSession),
            service_name=service_name,
        )

    @classmethod
    def from_settings(
        cls, settings: GoPeopleSettings | None = None
    ) -> SQLAlchemyCredentialProvider:
        settings = settings or GoPeopleSettings()
        if settings.database_url is None:
            raise ConfigurationError(
                "GOPEOPLE_DATABASE_URL is required for the credential store"
            )
        return cls.from_url(
            settings.database_url, service_name=settings.service_name
        )

    async def resolve_host(self) -> Result[str]:
        return (await self._credentials()).map(lambda c: c.host)

    async def resolve_key(self) -> Result[str]:
        return (await self._credentials()).map(lambda c: c.api_key)

    async def _credentials(self) -> Result[Credentials]:
        if self._cache is not None:
            logger.debug("Using cached %s credentials", self._service_name)
            return Ok(self._cache)

        outcome = await self._fetch()
        if isinstance(outcome, Ok):
            self._cache = outcome.value
        return outcome

    async def _fetch(self) -> Result[Credentials]:
        logger.info("Loading %s credentials from store", self._service_name)
        async with self._session_factory() as session:
            try:
                await session.connection()
            except STORE_ERRORS as exc:
                logger.warning("Credential store unreachable: %s", exc)
                return Err(
                    ConfigurationError(
                        "Failed to connect to credential store, "
                        f"reason: {exc}"
                    )
                )

            stmt = (
                select(CarrierProviderModel.meta)
                .where(CarrierProviderModel.name == self._service_name)
                .limit(1)
            )
            try:
                result = await session.execute(stmt)
                meta = result.scalars().first()
            except STORE_ERRORS as exc:
                logger.warning("Credential lookup failed: %s", exc)
                return Err(
                    ConfigurationError(
                        "Failed to find meta from table "
                        f"'carrier_providers', reason: {exc}"
                    )
                )

        if meta is None:
            return Err(
                CredentialsNotFoundError(
                    "No GoPeopleHost nor GoPeopleAPIKey configured"
                )
            )
        return self._parse(meta)

    def _parse(self, meta: Any) -> Result[Credentials]:
        try:
            if isinstance(meta, str | bytes):
                return Ok(Credentials.model_validate_json(meta))
            return Ok(Credentials.model_validate(meta))
        except PydanticValidationError as exc:
            return Err(
                ConfigurationError(
                    "Malformed carrier configuration for "
                    f"{self._service_name!r}: {exc}"
                )
            )
