"""ShipPosition model: position reports logged during a voyage."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText
from shipman.models.enums import PositionSource


class ShipPosition(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "ship_positions"

    voyage_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.voyages.id", ondelete="CASCADE"),
        nullable=False,
    )
    recorded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    latitude: Mapped[Decimal] = mapped_column(Numeric(9, 6), nullable=False)
    longitude: Mapped[Decimal] = mapped_column(Numeric(9, 6), nullable=False)
    speed_knots: Mapped[Decimal | None] = mapped_column(Numeric(8, 3))
    heading: Mapped[Decimal | None] = mapped_column(Numeric(8, 3))
    distance_logged_nm: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    fuel_remaining_mt: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    source: Mapped[str] = mapped_column(
        DefaultedText(PositionSource.MANUAL.value),
        nullable=False,
        server_default=PositionSource.MANUAL.value,
    )
    remarks: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_ship_positions_voyage_recorded", "voyage_id", "recorded_at"),
    )
