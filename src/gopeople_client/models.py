"""Carrier value records and their JSON projections."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum, StrEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    computed_field,
    field_validator,
)
from pydantic.alias_generators import to_camel

CARRIER_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S%z"


def format_carrier_datetime(value: datetime) -> str:
    """Render ``value`` as ``yyyy-MM-dd HH:mm:ss+HHMM``; naive means UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.strftime(CARRIER_DATETIME_FORMAT)


def parse_carrier_datetime(value: str) -> datetime:
    return datetime.strptime(value, CARRIER_DATETIME_FORMAT)


class CarrierModel(BaseModel):
    """Immutable record addressed by snake_case, serialized as camelCase."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Address(CarrierModel):
    """Postal address of a pickup or drop-off point.

    An address is commercial if and only if it carries a company name.
    """

    address1: str
    suburb: str
    state: str
    postcode: str
    send_update_sms: bool = Field(default=False, alias="sendUpdateSMS")
    contact_name: str | None = None
    contact_number: str | None = None
    contact_email: str | None = None
    company_name: str | None = None
    unit: str | None = None

    @computed_field(alias="isCommercial")
    @property
    def is_commercial(self) -> bool:
        return self.company_name is not None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ParcelType(StrEnum):
    DOCUMENT = "document"  # under 1kg
    FLOWERS = "flowers"  # bouquets or arrangements under 50cm
    SATCHEL = "satchel"  # satchel or bag under 5kg
    STANDARD = "standard"  # boxes under 5kg, within 50 x 30 x 20cm
    GROCERY = "grocery"  # food and/or beverages under 5kg
    DONUTS = "donuts"  # boxed, under 5kg, within 50 x 30 x 20cm
    CAKE = "cake"  # boxed, under 5kg, within 50 x 30 x 20cm
    CUSTOM = "custom"  # priced on the supplied dimensions


class Dimension(CarrierModel):
    """Physical size (cm) and weight (kg) of a custom parcel."""

    width: float
    height: float
    length: float
    weight: float


class Parcel(CarrierModel):
    type: ParcelType
    count: PositiveInt = Field(alias="number")
    product_id: str | None = None
    sku: str | None = None
    name: str | None = None
    dimension: Dimension | None = None

    def to_json(self) -> dict[str, Any]:
        """Project to the carrier shape.

        Dimensions are only sent for ``custom`` parcels.
        """
        data = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"dimension"},
        )
        if self.type is ParcelType.CUSTOM and self.dimension is not None:
            data.update(self.dimension.model_dump(mode="json"))
        return data


class Vehicle(StrEnum):
    SEDAN = "sedan"
    VAN = "van"


class Status(StrEnum):
    DELIVERING = "delivering"
    BOOKED_IN = "booked_in"
    PICKING_UP = "picking_up"
    RETURNING = "returning"
    REDELIVERING = "redelivering"
    CP_DELIVERING = "cp_delivering"
    COMPLETE = "complete"
    CP_DELIVERED = "cp_delivered"
    RETURNED = "returned"
    CLOSED = "closed"
    CANCELLED = "cancelled"
    ABANDONED = "abandoned"


class JobInfo(CarrierModel):
    """External identity of a booked job."""

    id: str
    code: str


class ShiftInfo(CarrierModel):
    id: str
    time: str


class JobStatus(CarrierModel):
    job_id: str
    ref: str = ""
    status: Annotated[Status | str, Field(union_mode="left_to_right")]

    @field_validator("ref", mode="before")
    @classmethod
    def _null_ref(cls, value: Any) -> Any:
        return "" if value is None else value


class QuoteKind(Enum):
    GO_NOW = "GoNOW"
    GO_SAMEDAY = "GoSAMEDAY"


class Quote(CarrierModel):
    service_name: str
    object_id: str
    amount: float
    currency: str | None = None
    pickup_after: datetime
    drop_off_by: datetime

    @field_validator("pickup_after", "drop_off_by", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_carrier_datetime(value)
        return value


class QuoteInfo(CarrierModel):
    """Priced options for a delivery.

    Exactly one of ``go_now_quotes`` and ``go_same_day_quotes`` is set.
    """

    distance: float
    expired_at: datetime
    go_now_quotes: list[Quote] | None = None
    go_same_day_quotes: list[Quote] | None = None

    @field_validator("expired_at", mode="before")
    @classmethod
    def _parse_expiry(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_carrier_datetime(value)
        return value

    @property
    def kind(self) -> QuoteKind:
        if self.go_now_quotes is not None:
            return QuoteKind.GO_NOW
        return QuoteKind.GO_SAMEDAY

    @property
    def quotes(self) -> list[Quote]:
        return self.go_now_quotes or self.go_same_day_quotes or []


class QuoteRequest(CarrierModel):
    """Options for requesting a quote.

    With ``pick_up_after`` set to a date only, the carrier returns a full
    day window on that date; left unset, the window lands on 2099-01-01.
    """

    address_from: Address
    address_to: Address
    parcels: list[Parcel]
    kind: QuoteKind
    pick_up_after: datetime | None = None
    drop_off_by: datetime | None = None


class JobBookingRequest(CarrierModel):
    """Book a GoNOW or GoSAMEDAY job from a previously acquired quote."""

    quote_id: str
    description: str
