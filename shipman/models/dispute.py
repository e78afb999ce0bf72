"""Dispute model: claims raised between charter parties."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import CHAR, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText
from shipman.models.enums import DisputeStatus


class Dispute(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "disputes"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Links
    voyage_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.voyages.id", ondelete="SET NULL")
    )
    payment_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.payments.id", ondelete="SET NULL")
    )
    laytime_entry_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.laytime_entries.id", ondelete="SET NULL")
    )

    # Parties (organisations live outside this schema)
    raised_by_org_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)
    assigned_to_org_id: Mapped[uuid.UUID | None] = mapped_column(GUID())

    subject: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    claimed_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    currency: Mapped[str | None] = mapped_column(CHAR(3))
    status: Mapped[str] = mapped_column(
        DefaultedText(DisputeStatus.OPEN.value),
        nullable=False,
        server_default=DisputeStatus.OPEN.value,
    )
    resolution_notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_disputes_charter_detail_id", "charter_detail_id"),
    )
