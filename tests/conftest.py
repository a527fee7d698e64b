"""Shared fixtures for gopeople-client tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gopeople_client.contrib.sqlalchemy.models import Base
from gopeople_client.exceptions import ConfigurationError
from gopeople_client.models import Address, Parcel, ParcelType
from gopeople_client.result import Err, Ok, Result
from gopeople_client.transport import CarrierRequest

HOST = "http://localhost:8080"
API_KEY = "this-api-key"


def envelope(result: Any = None, error_code: int = 0, **extra: Any) -> dict:
    """Carrier response envelope around ``result``."""
    body = {
        "errorCode": error_code,
        "message": "",
        "title": "",
        "debug": "",
        "result": result,
    }
    body.update(extra)
    return body


def days_from_today(days: int) -> str:
    return (datetime.now(tz=UTC) + timedelta(days=days)).strftime("%Y-%m-%d")


class StaticProvider:
    """Credential provider with fixed values that counts its calls."""

    def __init__(self, host: str = HOST, key: str = API_KEY) -> None:
        self.host = host
        self.key = key
        self.calls = 0

    async def resolve_host(self) -> Result[str]:
        self.calls += 1
        return Ok(self.host)

    async def resolve_key(self) -> Result[str]:
        self.calls += 1
        return Ok(self.key)


class BrokenProvider:
    """Credential provider whose key lookup always fails."""

    def __init__(self, message: str = "store offline") -> None:
        self.error = ConfigurationError(message)

    async def resolve_host(self) -> Result[str]:
        return Ok(HOST)

    async def resolve_key(self) -> Result[str]:
        return Err(self.error)


class RecordingTransport:
    """Transport that records requests and replays queued replies.

    A queued exception is raised instead of returned.
    """

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.requests: list[CarrierRequest] = []

    async def send(self, request: CarrierRequest) -> Any:
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture()
def provider() -> StaticProvider:
    return StaticProvider()


@pytest.fixture()
def store_address() -> Address:
    return Address(
        address1="85-93 Commonwealth St",
        suburb="Surry Hills",
        state="NSW",
        postcode="2010",
        company_name="Nomad",
    )


@pytest.fixture()
def customer_address() -> Address:
    return Address(
        address1="100 Pitt St",
        suburb="Sydney",
        state="NSW",
        postcode="2000",
    )


@pytest.fixture()
def grocery_parcel() -> Parcel:
    return Parcel(type=ParcelType.GROCERY, count=2)


@pytest.fixture()
def job_envelope() -> dict:
    return envelope(
        {
            "jobId": "894c0a10-fdb9-fb27-8ddb-d81c94a6e46c",
            "number": "1054231-6187",
            "ref": "",
            "category": "goshift",
            "trackingCode": "7OSPD3",
            "description": "Hot pot",
            "status": "booked_in",
            "pickUpAfter": "2020-07-06 11:00:00+1000",
            "dropOffBy": "2020-07-06 15:30:00+1000",
        }
    )


# ---------------------------------------------------------------------------
# SQLAlchemy fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
async def async_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def async_session_factory(async_engine):
    return async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )
