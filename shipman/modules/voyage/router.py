"""Voyage API routers: voyages, port calls, position reports and cargo."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.laytime.repository import LaytimeEntryRepository
from shipman.modules.laytime.schemas import LaytimeEntryResponse
from shipman.modules.voyage.cargo_load_repository import CargoLoadRepository
from shipman.modules.voyage.schemas import (
    CargoLoadCreate,
    CargoLoadResponse,
    CargoLoadUpdate,
    ShipPositionCreate,
    ShipPositionResponse,
    ShipPositionUpdate,
    VoyageCreate,
    VoyagePortCallUpdate,
    VoyagePortCreate,
    VoyagePortResponse,
    VoyagePortUpdate,
    VoyageProgressUpdate,
    VoyageResponse,
    VoyageUpdate,
)
from shipman.modules.voyage.ship_position_repository import ShipPositionRepository
from shipman.modules.voyage.voyage_port_repository import VoyagePortRepository
from shipman.modules.voyage.voyage_repository import VoyageRepository

router = APIRouter(prefix="/voyages", tags=["voyages"])
port_router = APIRouter(prefix="/voyage-ports", tags=["voyages"])
position_router = APIRouter(prefix="/ship-positions", tags=["voyages"])
cargo_router = APIRouter(prefix="/cargo-loads", tags=["voyages"])


# ---------------------------------------------------------------------------
# Voyages
# ---------------------------------------------------------------------------


@router.post("/", response_model=VoyageResponse, status_code=201)
async def create_voyage(
    body: VoyageCreate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyageRepository(session).create(body)


@router.get("/{voyage_id}", response_model=VoyageResponse)
async def get_voyage(
    voyage_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await VoyageRepository(session).get(voyage_id)


@router.put("/{voyage_id}", response_model=VoyageResponse)
async def update_voyage(
    voyage_id: uuid.UUID,
    body: VoyageUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyageRepository(session).update(voyage_id, body)


@router.patch("/{voyage_id}/progress", response_model=VoyageResponse)
async def update_voyage_progress(
    voyage_id: uuid.UUID,
    body: VoyageProgressUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyageRepository(session).update_progress(voyage_id, body)


@router.delete("/{voyage_id}", status_code=204)
async def delete_voyage(
    voyage_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await VoyageRepository(session).delete(voyage_id)


@router.get("/{voyage_id}/ports", response_model=list[VoyagePortResponse])
async def list_voyage_ports(
    voyage_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await VoyagePortRepository(session).list_for_voyage(voyage_id)


@router.get("/{voyage_id}/positions", response_model=list[ShipPositionResponse])
async def list_voyage_positions(
    voyage_id: uuid.UUID,
    limit: int | None = Query(None, ge=0),
    session: AsyncSession = Depends(get_db),
):
    return await ShipPositionRepository(session).list_for_voyage(voyage_id, limit)


@router.get("/{voyage_id}/cargo", response_model=list[CargoLoadResponse])
async def list_voyage_cargo(
    voyage_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await CargoLoadRepository(session).list_for_voyage(voyage_id)


@router.get("/{voyage_id}/laytime", response_model=list[LaytimeEntryResponse])
async def list_voyage_laytime(
    voyage_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).list_for_voyage(voyage_id)


# ---------------------------------------------------------------------------
# Port calls
# ---------------------------------------------------------------------------


@port_router.post("/", response_model=VoyagePortResponse, status_code=201)
async def create_voyage_port(
    body: VoyagePortCreate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyagePortRepository(session).create(body)


@port_router.get("/{port_id}", response_model=VoyagePortResponse)
async def get_voyage_port(
    port_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await VoyagePortRepository(session).get(port_id)


@port_router.put("/{port_id}", response_model=VoyagePortResponse)
async def update_voyage_port(
    port_id: uuid.UUID,
    body: VoyagePortUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyagePortRepository(session).update(port_id, body)


@port_router.patch("/{port_id}/call", response_model=VoyagePortResponse)
async def update_voyage_port_call(
    port_id: uuid.UUID,
    body: VoyagePortCallUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await VoyagePortRepository(session).update_call(port_id, body)


@port_router.delete("/{port_id}", status_code=204)
async def delete_voyage_port(
    port_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await VoyagePortRepository(session).delete(port_id)


# ---------------------------------------------------------------------------
# Position reports
# ---------------------------------------------------------------------------


@position_router.post("/", response_model=ShipPositionResponse, status_code=201)
async def create_ship_position(
    body: ShipPositionCreate,
    session: AsyncSession = Depends(get_db),
):
    return await ShipPositionRepository(session).create(body)


@position_router.get("/{position_id}", response_model=ShipPositionResponse)
async def get_ship_position(
    position_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await ShipPositionRepository(session).get(position_id)


@position_router.put("/{position_id}", response_model=ShipPositionResponse)
async def update_ship_position(
    position_id: uuid.UUID,
    body: ShipPositionUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await ShipPositionRepository(session).update(position_id, body)


@position_router.delete("/{position_id}", status_code=204)
async def delete_ship_position(
    position_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await ShipPositionRepository(session).delete(position_id)


# ---------------------------------------------------------------------------
# Cargo
# ---------------------------------------------------------------------------


@cargo_router.post("/", response_model=CargoLoadResponse, status_code=201)
async def create_cargo_load(
    body: CargoLoadCreate,
    session: AsyncSession = Depends(get_db),
):
    return await CargoLoadRepository(session).create(body)


@cargo_router.get("/{load_id}", response_model=CargoLoadResponse)
async def get_cargo_load(
    load_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await CargoLoadRepository(session).get(load_id)


@cargo_router.patch("/{load_id}", response_model=CargoLoadResponse)
async def update_cargo_load(
    load_id: uuid.UUID,
    body: CargoLoadUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await CargoLoadRepository(session).update(load_id, body)


@cargo_router.delete("/{load_id}", status_code=204)
async def delete_cargo_load(
    load_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await CargoLoadRepository(session).delete(load_id)
