"""VoyagePort model: a port call within a voyage's rotation."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID


class VoyagePort(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "voyage_ports"

    voyage_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.voyages.id", ondelete="CASCADE"),
        nullable=False,
    )
    port_name: Mapped[str] = mapped_column(Text, nullable=False)
    port_country: Mapped[str | None] = mapped_column(Text)
    port_unlocode: Mapped[str | None] = mapped_column(Text)  # UN/LOCODE
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    arrived_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    departed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    laytime_hours: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    cargo_operations: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_voyage_ports_voyage_id", "voyage_id"),
    )
