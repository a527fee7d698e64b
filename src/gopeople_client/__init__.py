# src/gopeople_client/__init__.py
"""Typed asynchronous client for the GoPeople courier API."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "Address",
    "CarrierError",
    "ConfigurationError",
    "CredentialProvider",
    "DecodeError",
    "Dimension",
    "EnvCredentialProvider",
    "Err",
    "GoPeopleError",
    "GoPeopleSettings",
    "HttpxTransport",
    "JobBookingRequest",
    "JobInfo",
    "JobStatus",
    "Ok",
    "Parcel",
    "ParcelType",
    "QuoteInfo",
    "QuoteKind",
    "QuoteRequest",
    "Result",
    "ShiftInfo",
    "Status",
    "Transport",
    "TransportError",
    "ValidationError",
    "Vehicle",
    "__version__",
    "and_then",
    "book_instant",
    "book_job",
    "book_shifts",
    "cancel_job",
    "fetch_job_status",
    "get_quote",
]

if TYPE_CHECKING:
    from gopeople_client.config import GoPeopleSettings
    from gopeople_client.credentials import EnvCredentialProvider
    from gopeople_client.exceptions import (
        CarrierError,
        ConfigurationError,
        DecodeError,
        GoPeopleError,
        TransportError,
        ValidationError,
    )
    from gopeople_client.models import (
        Address,
        Dimension,
        JobBookingRequest,
        JobInfo,
        JobStatus,
        Parcel,
        ParcelType,
        QuoteInfo,
        QuoteKind,
        QuoteRequest,
        ShiftInfo,
        Status,
        Vehicle,
    )
    from gopeople_client.operations import (
        book_instant,
        book_job,
        book_shifts,
        cancel_job,
        fetch_job_status,
        get_quote,
    )
    from gopeople_client.protocols import CredentialProvider, Transport
    from gopeople_client.result import Err, Ok, Result, and_then
    from gopeople_client.transport import HttpxTransport


def __getattr__(name: str):
    # Lazy imports to avoid loading httpx and pydantic on package import.
    if name == "GoPeopleSettings":
        from gopeople_client.config import GoPeopleSettings

        return GoPeopleSettings
    if name == "EnvCredentialProvider":
        from gopeople_client.credentials import EnvCredentialProvider

        return EnvCredentialProvider
    if name == "HttpxTransport":
        from gopeople_client.transport import HttpxTransport

        return HttpxTransport
    if name in ("CredentialProvider", "Transport"):
        from gopeople_client import protocols

        return getattr(protocols, name)
    if name in ("Err", "Ok", "Result", "and_then"):
        from gopeople_client import result

        return getattr(result, name)
    if name in (
        "CarrierError",
        "ConfigurationError",
        "DecodeError",
        "GoPeopleError",
        "TransportError",
        "ValidationError",
    ):
        from gopeople_client import exceptions

        return getattr(exceptions, name)
    if name in (
        "Address",
        "Dimension",
        "JobBookingRequest",
        "JobInfo",
        "JobStatus",
        "Parcel",
        "ParcelType",
        "QuoteInfo",
        "QuoteKind",
        "QuoteRequest",
        "ShiftInfo",
        "Status",
        "Vehicle",
    ):
        from gopeople_client import models

        return getattr(models, name)
    if name in (
        "book_instant",
        "book_job",
        "book_shifts",
        "cancel_job",
        "fetch_job_status",
        "get_quote",
    ):
        from gopeople_client import operations

        return getattr(operations, name)
    raise AttributeError(
        f"module 'gopeople_client' has no attribute {name!r}"
    )
