"""Carrier operations.

Each operation is a coroutine returning a
:class:`~gopeople_client.result.Result`; none raises for an expected
failure. Pipelines chain with :func:`~gopeople_client.result.and_then`::

    result = await and_then(
        book_shifts(provider, store, ParcelType.GROCERY, [day], "11:00 AM",
                    3, 1, Vehicle.SEDAN, ["trolley"], "Be on time"),
        lambda _shifts: book_instant(provider, store, customer, parcels,
                                     pick_up, "Sushi set"),
    )
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from gopeople_client.decoders import (
    decode_cancelled_job,
    decode_job_info,
    decode_job_statuses,
    decode_quote_info,
    decode_shift_infos,
)
from gopeople_client.models import (
    Address,
    JobBookingRequest,
    JobInfo,
    JobStatus,
    Parcel,
    ParcelType,
    QuoteInfo,
    QuoteKind,
    QuoteRequest,
    ShiftInfo,
    Vehicle,
    format_carrier_datetime,
)
from gopeople_client.pipeline import Body, Operation, run_pipeline
from gopeople_client.protocols import CredentialProvider, Transport
from gopeople_client.result import Err, Ok, Result
from gopeople_client.validators import (
    validate_hours,
    validate_shifts,
    validate_time,
)

INSTANT_BOOKING = Operation("POST", "/book/instant", decode_job_info)
SHIFT_BOOKING = Operation("POST", "/shift", decode_shift_infos)
QUOTE = Operation("POST", "/quote", decode_quote_info)
QUOTE_BOOKING = Operation("POST", "/book", decode_job_info)
CANCEL_JOB = Operation("DELETE", "/job", decode_cancelled_job)
JOB_STATUS = Operation("GET", "/job/status", decode_job_statuses)


def _omit_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


async def book_instant(
    provider: CredentialProvider,
    address_from: Address,
    address_to: Address,
    parcels: Sequence[Parcel],
    pick_up_date: datetime,
    description: str,
    *,
    transport: Transport | None = None,
) -> Result[JobInfo]:
    """Instantly book a GoSHIFT job."""

    def prepare() -> Result[Body]:
        return Ok(
            {
                "addressFrom": address_from.to_json(),
                "addressTo": address_to.to_json(),
                "parcels": [p.to_json() for p in parcels],
                "pickUpDate": format_carrier_datetime(pick_up_date),
                "description": description,
            }
        )

    return await run_pipeline(
        INSTANT_BOOKING, provider, prepare=prepare, transport=transport
    )


async def book_shifts(
    provider: CredentialProvider,
    pickup_address: Address,
    parcel_type: ParcelType,
    dates: Sequence[str],
    time: str,
    hours: int,
    runners: int,
    vehicle: Vehicle,
    equipments: Sequence[str],
    note: str,
    *,
    cbd: bool = False,
    return_address: Address | None = None,
    transport: Transport | None = None,
) -> Result[list[ShiftInfo]]:
    """Book shifts for a store registered in the GoPeople account.

    Args:
        provider: Source of the carrier host and API key.
        pickup_address: The pickup address, usually the store.
        parcel_type: Parcel category carried during the shifts.
        dates: Shift dates as ``yyyy-MM-dd``, each within the next 30 days.
        time: Shift start time, ``00:00 AM`` / ``00:00 PM``.
        hours: Shift duration in hours; at least 3.
        runners: Number of runners; 0 when using your own runner.
        vehicle: Vehicle type.
        equipments: Equipment required, e.g. ``"trolley"``.
        note: Note for the runner.
        cbd: Whether the shift is in a central business district.
        return_address: Where the runner returns to, if not the pickup.
        transport: Sends the request. Defaults to a new HttpxTransport.
    """

    def prepare() -> Result[Body]:
        checked_dates = validate_shifts(dates)
        if isinstance(checked_dates, Err):
            return checked_dates
        checked_hours = validate_hours(hours)
        if isinstance(checked_hours, Err):
            return checked_hours
        checked_time = validate_time(time)
        if isinstance(checked_time, Err):
            return checked_time

        return Ok(
            _omit_none(
                {
                    "pickupAddress": pickup_address.to_json(),
                    "returnAddress": (
                        return_address.to_json() if return_address else None
                    ),
                    "parcelType": parcel_type.value,
                    "dates": checked_dates.value,
                    "time": checked_time.value,
                    "hours": checked_hours.value,
                    "runners": runners,
                    "vehicle": vehicle.value,
                    "equipments": list(equipments),
                    "note": note,
                    "cbd": cbd,
                }
            )
        )

    return await run_pipeline(
        SHIFT_BOOKING, provider, prepare=prepare, transport=transport
    )


async def get_quote(
    provider: CredentialProvider,
    request: QuoteRequest,
    *,
    transport: Transport | None = None,
) -> Result[QuoteInfo]:
    """Get a GoNOW or GoSAMEDAY quote."""

    def prepare() -> Result[Body]:
        return Ok(
            _omit_none(
                {
                    "addressFrom": request.address_from.to_json(),
                    "addressTo": request.address_to.to_json(),
                    "parcels": [p.to_json() for p in request.parcels],
                    "pickUpAfter": (
                        format_carrier_datetime(request.pick_up_after)
                        if request.pick_up_after
                        else None
                    ),
                    "dropOffBy": (
                        format_carrier_datetime(request.drop_off_by)
                        if request.drop_off_by
                        else None
                    ),
                    "onDemand": request.kind is QuoteKind.GO_NOW,
                    "setRun": request.kind is QuoteKind.GO_SAMEDAY,
                }
            )
        )

    return await run_pipeline(
        QUOTE, provider, prepare=prepare, transport=transport
    )


async def book_job(
    provider: CredentialProvider,
    request: JobBookingRequest,
    *,
    transport: Transport | None = None,
) -> Result[JobInfo]:
    """Book a job with a quote ID acquired from :func:`get_quote`."""

    def prepare() -> Result[Body]:
        return Ok(
            {"quoteId": request.quote_id, "description": request.description}
        )

    return await run_pipeline(
        QUOTE_BOOKING, provider, prepare=prepare, transport=transport
    )


async def cancel_job(
    provider: CredentialProvider,
    job_id: str,
    *,
    transport: Transport | None = None,
) -> Result[str]:
    """Cancel an existing job; returns the cancelled job ID."""
    return await run_pipeline(
        CANCEL_JOB, provider, query={"id": job_id}, transport=transport
    )


async def fetch_job_status(
    provider: CredentialProvider,
    day: date,
    *,
    transport: Transport | None = None,
) -> Result[list[JobStatus]]:
    """Fetch the status of every job scheduled on ``day``."""
    return await run_pipeline(
        JOB_STATUS,
        provider,
        query={"date": day.strftime("%Y-%m-%d")},
        transport=transport,
    )
