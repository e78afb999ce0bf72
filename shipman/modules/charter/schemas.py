"""Pydantic schemas for charter details."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CharterTerms(BaseModel):
    title: str = Field(..., min_length=1)
    charter_reference_code: str | None = None
    vessel_name: str | None = None
    counterparty_name: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    laytime_allowance_hours: Decimal | None = None
    demurrage_rate: Decimal | None = None
    demurrage_currency: str | None = Field(None, min_length=3, max_length=3)
    fuel_clause: str | None = None
    payment_terms: str | None = None
    ai_document_path: str | None = None
    ai_extracted_terms: dict | None = None
    last_reviewed_at: datetime | None = None
    notes: str | None = None


class CharterCreate(CharterTerms):
    created_by_user_id: uuid.UUID | None = None
    # Absent values take the store defaults ("draft" / "pending").
    status: str | None = None
    ai_status: str | None = None


class CharterUpdate(CharterTerms):
    """Full replacement of the editable columns."""

    status: str = Field(..., min_length=1)
    ai_status: str = Field(..., min_length=1)


class CharterStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)


class CharterAiUpdate(BaseModel):
    """AI extraction progress; absent fields keep their stored value."""

    ai_status: str | None = None
    ai_document_path: str | None = None
    ai_extracted_terms: dict | None = None
    last_reviewed_at: datetime | None = None


class CharterResponse(CharterTerms):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_by_user_id: uuid.UUID | None = None
    status: str
    ai_status: str
    created_at: datetime
    updated_at: datetime


class CharterListResponse(BaseModel):
    items: list[CharterResponse]
    limit: int
    offset: int
