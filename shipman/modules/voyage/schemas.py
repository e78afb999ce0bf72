"""Pydantic schemas for voyages and their port calls, positions and cargo."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Voyage
# ---------------------------------------------------------------------------


class VoyageDetails(BaseModel):
    voyage_number: str | None = None
    vessel_name: str | None = None
    departure_port: str | None = None
    arrival_port: str | None = None
    planned_departure_at: datetime | None = None
    planned_arrival_at: datetime | None = None
    actual_departure_at: datetime | None = None
    actual_arrival_at: datetime | None = None
    distance_nm: Decimal | None = None
    time_at_sea_hours: Decimal | None = None
    fuel_consumed_mt: Decimal | None = None
    fuel_type: str | None = None
    weather_summary: str | None = None
    notes: str | None = None


class VoyageCreate(VoyageDetails):
    charter_detail_id: uuid.UUID
    status: str | None = None


class VoyageUpdate(VoyageDetails):
    """Full replacement of the editable columns."""

    status: str = Field(..., min_length=1)


class VoyageProgressUpdate(BaseModel):
    """Progress report; absent fields keep their stored value."""

    actual_departure_at: datetime | None = None
    actual_arrival_at: datetime | None = None
    distance_nm: Decimal | None = None
    time_at_sea_hours: Decimal | None = None
    fuel_consumed_mt: Decimal | None = None
    fuel_type: str | None = None
    weather_summary: str | None = None
    status: str | None = None
    notes: str | None = None


class VoyageResponse(VoyageDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    status: str
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Voyage ports
# ---------------------------------------------------------------------------


class VoyagePortDetails(BaseModel):
    port_name: str = Field(..., min_length=1)
    port_country: str | None = None
    port_unlocode: str | None = Field(None, max_length=6)
    latitude: Decimal | None = Field(None, ge=-90, le=90)
    longitude: Decimal | None = Field(None, ge=-180, le=180)
    arrived_at: datetime | None = None
    departed_at: datetime | None = None
    laytime_hours: Decimal | None = None
    cargo_operations: str | None = None
    notes: str | None = None


class VoyagePortCreate(VoyagePortDetails):
    voyage_id: uuid.UUID


class VoyagePortUpdate(VoyagePortDetails):
    """Full replacement of the editable columns."""


class VoyagePortCallUpdate(BaseModel):
    """Port call progress; absent fields keep their stored value."""

    arrived_at: datetime | None = None
    departed_at: datetime | None = None
    laytime_hours: Decimal | None = None
    cargo_operations: str | None = None
    notes: str | None = None


class VoyagePortResponse(VoyagePortDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    voyage_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Ship positions
# ---------------------------------------------------------------------------


class ShipPositionDetails(BaseModel):
    recorded_at: datetime
    latitude: Decimal = Field(..., ge=-90, le=90)
    longitude: Decimal = Field(..., ge=-180, le=180)
    speed_knots: Decimal | None = None
    heading: Decimal | None = None
    distance_logged_nm: Decimal | None = None
    fuel_remaining_mt: Decimal | None = None
    remarks: str | None = None


class ShipPositionCreate(ShipPositionDetails):
    voyage_id: uuid.UUID
    source: str | None = None


class ShipPositionUpdate(ShipPositionDetails):
    """Full replacement of the editable columns."""

    source: str = Field(..., min_length=1)


class ShipPositionResponse(ShipPositionDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    voyage_id: uuid.UUID
    source: str
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Cargo loads
# ---------------------------------------------------------------------------


class CargoLoadDetails(BaseModel):
    load_port: str | None = None
    discharge_port: str | None = None
    commodity: str | None = None
    quantity: Decimal | None = None
    unit: str | None = None
    stowage_plan: dict | None = None
    hazardous: bool | None = None
    notes: str | None = None


class CargoLoadCreate(CargoLoadDetails):
    voyage_id: uuid.UUID


class CargoLoadUpdate(CargoLoadDetails):
    """Absent fields keep their stored value."""


class CargoLoadResponse(CargoLoadDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    voyage_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
