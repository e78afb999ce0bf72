"""LaytimeEntry model: time counted against the laytime allowance."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID


class LaytimeEntry(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "laytime_entries"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    voyage_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.voyages.id", ondelete="SET NULL")
    )
    port_name: Mapped[str | None] = mapped_column(Text)
    activity: Mapped[str | None] = mapped_column(Text)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    hours_counted: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    remarks: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_laytime_entries_charter_detail_id", "charter_detail_id"),
        Index("ix_laytime_entries_voyage_id", "voyage_id"),
    )
