"""Pydantic schemas for demurrage records."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DemurrageRecordDetails(BaseModel):
    voyage_id: uuid.UUID | None = None
    laytime_entry_id: uuid.UUID | None = None
    claimed_hours: Decimal | None = None
    claimed_amount: Decimal | None = None
    reference: str | None = None
    supporting_doc_uri: str | None = None
    notes: str | None = None


class DemurrageRecordCreate(DemurrageRecordDetails):
    charter_detail_id: uuid.UUID
    # Absent values take the store defaults ("USD" / "draft").
    currency: str | None = Field(None, min_length=3, max_length=3)
    status: str | None = None


class DemurrageRecordUpdate(DemurrageRecordDetails):
    """Full replacement of the editable columns."""

    currency: str = Field(..., min_length=3, max_length=3)
    status: str = Field(..., min_length=1)


class DemurrageStatusUpdate(BaseModel):
    """Claim progress; absent fields keep their stored value."""

    status: str | None = None
    claimed_hours: Decimal | None = None
    claimed_amount: Decimal | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    reference: str | None = None
    supporting_doc_uri: str | None = None
    notes: str | None = None


class DemurrageRecordResponse(DemurrageRecordDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    currency: str
    status: str
    created_at: datetime
    updated_at: datetime
