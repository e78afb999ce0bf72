"""Voyage model: one leg performed under a charter."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText
from shipman.models.enums import VoyageStatus


class Voyage(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "voyages"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    voyage_number: Mapped[str | None] = mapped_column(Text)
    vessel_name: Mapped[str | None] = mapped_column(Text)
    departure_port: Mapped[str | None] = mapped_column(Text)
    arrival_port: Mapped[str | None] = mapped_column(Text)
    planned_departure_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    planned_arrival_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_departure_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_arrival_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    distance_nm: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    time_at_sea_hours: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    fuel_consumed_mt: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    fuel_type: Mapped[str | None] = mapped_column(Text)
    weather_summary: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        DefaultedText(VoyageStatus.PLANNED.value),
        nullable=False,
        server_default=VoyageStatus.PLANNED.value,
    )
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_voyages_charter_detail_id", "charter_detail_id"),
    )
