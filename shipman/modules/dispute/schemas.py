"""Pydantic schemas for charter disputes."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DisputeDetails(BaseModel):
    voyage_id: uuid.UUID | None = None
    payment_id: uuid.UUID | None = None
    laytime_entry_id: uuid.UUID | None = None
    assigned_to_org_id: uuid.UUID | None = None
    subject: str = Field(..., min_length=1)
    description: str | None = None
    claimed_amount: Decimal | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    resolution_notes: str | None = None


class DisputeCreate(DisputeDetails):
    charter_detail_id: uuid.UUID
    raised_by_org_id: uuid.UUID
    status: str | None = None


class DisputeUpdate(DisputeDetails):
    """Full replacement of the editable columns."""

    status: str = Field(..., min_length=1)


class DisputeStatusUpdate(BaseModel):
    """Absent fields keep their stored value. Any status may follow any other."""

    status: str | None = None
    resolution_notes: str | None = None


class DisputeResponse(DisputeDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    raised_by_org_id: uuid.UUID
    status: str
    created_at: datetime
    updated_at: datetime
