"""BillOfLading model: cargo receipt documents and their stored copies."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, Blob


class BillOfLading(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "bills_of_lading"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    voyage_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.voyages.id", ondelete="SET NULL")
    )
    document_number: Mapped[str] = mapped_column(Text, nullable=False)
    issue_date: Mapped[date | None] = mapped_column(Date)
    issuer: Mapped[str | None] = mapped_column(Text)
    consignee: Mapped[str | None] = mapped_column(Text)
    notify_party: Mapped[str | None] = mapped_column(Text)
    cargo_description: Mapped[str | None] = mapped_column(Text)
    quantity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    quantity_unit: Mapped[str | None] = mapped_column(Text)
    storage_uri: Mapped[str | None] = mapped_column(Text)
    checksum: Mapped[str | None] = mapped_column(Text)
    encrypted_key: Mapped[bytes | None] = mapped_column(Blob)
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_bills_of_lading_charter_detail_id", "charter_detail_id"),
    )
