"""Pydantic schemas for the vessel registry."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class VesselBase(BaseModel):
    name: str = Field(..., min_length=1)
    imo_number: str | None = Field(None, max_length=10)
    flag_state: str | None = None
    vessel_type: str | None = None
    call_sign: str | None = None
    deadweight_tonnage: Decimal | None = None
    gross_tonnage: Decimal | None = None
    net_tonnage: Decimal | None = None
    capacity: dict | None = None
    build_year: int | None = Field(None, ge=0, le=32767)
    class_society: str | None = None
    owner: str | None = None
    manager: str | None = None
    documentation_uri: str | None = None
    notes: str | None = None


class VesselCreate(VesselBase):
    pass


class VesselUpdate(VesselBase):
    """Full replacement: optional fields left out are cleared."""


class VesselResponse(VesselBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class VesselListResponse(BaseModel):
    items: list[VesselResponse]
    limit: int
    offset: int
