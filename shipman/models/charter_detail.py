"""CharterDetail model: the charter party and its AI extraction state."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import CHAR, Date, DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText, JSONDocument
from shipman.models.enums import AiStatus, CharterStatus


class CharterDetail(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "charter_details"

    created_by_user_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.users.id", ondelete="SET NULL")
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    charter_reference_code: Mapped[str | None] = mapped_column(Text)
    vessel_name: Mapped[str | None] = mapped_column(Text)
    counterparty_name: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        DefaultedText(CharterStatus.DRAFT.value),
        nullable=False,
        server_default=CharterStatus.DRAFT.value,
    )
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    laytime_allowance_hours: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    demurrage_rate: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    demurrage_currency: Mapped[str | None] = mapped_column(CHAR(3))
    fuel_clause: Mapped[str | None] = mapped_column(Text)
    payment_terms: Mapped[str | None] = mapped_column(Text)
    ai_status: Mapped[str] = mapped_column(
        DefaultedText(AiStatus.PENDING.value),
        nullable=False,
        server_default=AiStatus.PENDING.value,
    )
    ai_document_path: Mapped[str | None] = mapped_column(Text)
    ai_extracted_terms: Mapped[dict | None] = mapped_column(JSONDocument)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_charter_details_created_at", "created_at"),
    )
