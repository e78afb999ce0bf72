"""Vessel model: fleet registry."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Numeric, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.types import JSONDocument


class Vessel(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "vessels"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    imo_number: Mapped[str | None] = mapped_column(Text, unique=True)
    flag_state: Mapped[str | None] = mapped_column(Text)
    vessel_type: Mapped[str | None] = mapped_column(Text)
    call_sign: Mapped[str | None] = mapped_column(Text)
    deadweight_tonnage: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    gross_tonnage: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    net_tonnage: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    capacity: Mapped[dict | None] = mapped_column(JSONDocument)
    build_year: Mapped[int | None] = mapped_column(SmallInteger)
    class_society: Mapped[str | None] = mapped_column(Text)
    owner: Mapped[str | None] = mapped_column(Text)
    manager: Mapped[str | None] = mapped_column(Text)
    documentation_uri: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
