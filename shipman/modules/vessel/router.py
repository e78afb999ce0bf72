"""Vessel registry API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.vessel.repository import VesselRepository
from shipman.modules.vessel.schemas import (
    VesselCreate,
    VesselListResponse,
    VesselResponse,
    VesselUpdate,
)

router = APIRouter(prefix="/vessels", tags=["vessels"])


@router.get("/", response_model=VesselListResponse)
async def list_vessels(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db),
):
    vessels = await VesselRepository(session).list_vessels(limit=limit, offset=offset)
    return VesselListResponse(
        items=[VesselResponse.model_validate(v) for v in vessels],
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=VesselResponse, status_code=201)
async def create_vessel(
    body: VesselCreate,
    session: AsyncSession = Depends(get_db),
):
    return await VesselRepository(session).create(body)


@router.get("/{vessel_id}", response_model=VesselResponse)
async def get_vessel(
    vessel_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await VesselRepository(session).get(vessel_id)


@router.put("/{vessel_id}", response_model=VesselResponse)
async def update_vessel(
    vessel_id: uuid.UUID,
    body: VesselUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await VesselRepository(session).update(vessel_id, body)


@router.delete("/{vessel_id}", status_code=204)
async def delete_vessel(
    vessel_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await VesselRepository(session).delete(vessel_id)
