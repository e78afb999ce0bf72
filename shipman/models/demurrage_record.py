"""DemurrageRecord model: demurrage claims raised under a charter."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import CHAR, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText
from shipman.models.enums import DEFAULT_CURRENCY, DemurrageStatus


class DemurrageRecord(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "demurrage_records"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    voyage_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.voyages.id", ondelete="SET NULL")
    )
    laytime_entry_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.laytime_entries.id", ondelete="SET NULL")
    )
    claimed_hours: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    claimed_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    currency: Mapped[str] = mapped_column(
        CHAR(3), nullable=False, server_default=DEFAULT_CURRENCY
    )
    status: Mapped[str] = mapped_column(
        DefaultedText(DemurrageStatus.DRAFT.value),
        nullable=False,
        server_default=DemurrageStatus.DRAFT.value,
    )
    reference: Mapped[str | None] = mapped_column(Text)
    supporting_doc_uri: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_demurrage_records_charter_detail_id", "charter_detail_id"),
    )
