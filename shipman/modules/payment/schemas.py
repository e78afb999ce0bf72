"""Pydantic schemas for charter payments."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PaymentDetails(BaseModel):
    voyage_id: uuid.UUID | None = None
    due_date: date | None = None
    paid_at: datetime | None = None
    amount: Decimal
    payment_method: str | None = None
    reference: str | None = None
    notes: str | None = None


class PaymentCreate(PaymentDetails):
    charter_detail_id: uuid.UUID
    # Absent values take the store defaults ("general" / "USD" / "pending").
    category: str | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    status: str | None = None


class PaymentUpdate(PaymentDetails):
    """Full replacement of the editable columns."""

    category: str = Field(..., min_length=1)
    currency: str = Field(..., min_length=3, max_length=3)
    status: str = Field(..., min_length=1)


class PaymentStatusUpdate(BaseModel):
    """Absent fields keep their stored value."""

    status: str | None = None
    paid_at: datetime | None = None


class PaymentResponse(PaymentDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    category: str
    currency: str
    status: str
    created_at: datetime
    updated_at: datetime
