"""CargoLoad model: a parcel carried on a voyage."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import GUID, JSONDocument


class CargoLoad(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "cargo_loads"

    voyage_id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        ForeignKey("shipman.voyages.id", ondelete="CASCADE"),
        nullable=False,
    )
    load_port: Mapped[str | None] = mapped_column(Text)
    discharge_port: Mapped[str | None] = mapped_column(Text)
    commodity: Mapped[str | None] = mapped_column(Text)
    quantity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    unit: Mapped[str | None] = mapped_column(Text)
    stowage_plan: Mapped[dict | None] = mapped_column(JSONDocument)
    hazardous: Mapped[bool | None] = mapped_column(Boolean)
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("ix_cargo_loads_voyage_id", "voyage_id"),
    )
