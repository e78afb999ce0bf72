"""Payment model: hire, freight and other charges due under a charter."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import CHAR, Date, DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, DefaultedText
from shipman.models.enums import DEFAULT_CURRENCY, PaymentCategory, PaymentStatus


class Payment(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "payments"

    charter_detail_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.charter_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    voyage_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("shipman.voyages.id", ondelete="SET NULL")
    )
    category: Mapped[str] = mapped_column(
        DefaultedText(PaymentCategory.GENERAL.value),
        nullable=False,
        server_default=PaymentCategory.GENERAL.value,
    )
    due_date: Mapped[date | None] = mapped_column(Date)
    paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(
        CHAR(3), nullable=False, server_default=DEFAULT_CURRENCY
    )
    status: Mapped[str] = mapped_column(
        DefaultedText(PaymentStatus.PENDING.value),
        nullable=False,
        server_default=PaymentStatus.PENDING.value,
    )
    payment_method: Mapped[str | None] = mapped_column(Text)
    reference: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_payments_charter_detail_id", "charter_detail_id"),
    )
