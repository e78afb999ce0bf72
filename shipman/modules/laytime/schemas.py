"""Pydantic schemas for laytime entries."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class LaytimeEntryDetails(BaseModel):
    voyage_id: uuid.UUID | None = None
    port_name: str | None = None
    activity: str | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None
    hours_counted: Decimal | None = None
    remarks: str | None = None


class LaytimeEntryCreate(LaytimeEntryDetails):
    charter_detail_id: uuid.UUID


class LaytimeEntryUpdate(LaytimeEntryDetails):
    """Full replacement of the editable columns."""


class LaytimeProgressUpdate(BaseModel):
    """Closing out an entry; absent fields keep their stored value."""

    ended_at: datetime | None = None
    hours_counted: Decimal | None = None
    remarks: str | None = None


class LaytimeEntryResponse(LaytimeEntryDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
