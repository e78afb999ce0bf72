"""Dispute API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.dispute.repository import DisputeRepository
from shipman.modules.dispute.schemas import (
    DisputeCreate,
    DisputeResponse,
    DisputeStatusUpdate,
    DisputeUpdate,
)

router = APIRouter(prefix="/disputes", tags=["disputes"])


@router.post("/", response_model=DisputeResponse, status_code=201)
async def create_dispute(
    body: DisputeCreate,
    session: AsyncSession = Depends(get_db),
):
    return await DisputeRepository(session).create(body)


@router.get("/{dispute_id}", response_model=DisputeResponse)
async def get_dispute(
    dispute_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await DisputeRepository(session).get(dispute_id)


@router.put("/{dispute_id}", response_model=DisputeResponse)
async def update_dispute(
    dispute_id: uuid.UUID,
    body: DisputeUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await DisputeRepository(session).update(dispute_id, body)


@router.patch("/{dispute_id}/status", response_model=DisputeResponse)
async def update_dispute_status(
    dispute_id: uuid.UUID,
    body: DisputeStatusUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await DisputeRepository(session).update_status(
        dispute_id, status=body.status, resolution_notes=body.resolution_notes
    )


@router.delete("/{dispute_id}", status_code=204)
async def delete_dispute(
    dispute_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await DisputeRepository(session).delete(dispute_id)
