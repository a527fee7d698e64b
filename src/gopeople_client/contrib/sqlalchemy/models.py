"""SQLAlchemy 2.0 models for the carrier credential store."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all gopeople-client models."""


class CarrierProviderModel(Base):
    """One carrier integration.

    ``meta`` holds ``{"host": ..., "key": ...}`` for the GoPeople row.
    """

    __tablename__ = "carrier_providers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(Text, index=True)
    location: Mapped[str] = mapped_column(String(16), default="")
    priority: Mapped[int] = mapped_column(default=0)
    min_time_to_order: Mapped[int] = mapped_column(default=0)
    time_to_expire: Mapped[int | None] = mapped_column(
        nullable=True, default=None
    )
    meta: Mapped[dict[str, Any]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(tz=UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(tz=UTC),
        onupdate=lambda: datetime.now(tz=UTC),
    )
