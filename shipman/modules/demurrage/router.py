"""Demurrage record API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.demurrage.repository import DemurrageRecordRepository
from shipman.modules.demurrage.schemas import (
    DemurrageRecordCreate,
    DemurrageRecordResponse,
    DemurrageRecordUpdate,
    DemurrageStatusUpdate,
)

router = APIRouter(prefix="/demurrage-records", tags=["demurrage"])


@router.post("/", response_model=DemurrageRecordResponse, status_code=201)
async def create_demurrage_record(
    body: DemurrageRecordCreate,
    session: AsyncSession = Depends(get_db),
):
    return await DemurrageRecordRepository(session).create(body)


@router.get("/{record_id}", response_model=DemurrageRecordResponse)
async def get_demurrage_record(
    record_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await DemurrageRecordRepository(session).get(record_id)


@router.put("/{record_id}", response_model=DemurrageRecordResponse)
async def update_demurrage_record(
    record_id: uuid.UUID,
    body: DemurrageRecordUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await DemurrageRecordRepository(session).update(record_id, body)


@router.patch("/{record_id}/status", response_model=DemurrageRecordResponse)
async def update_demurrage_status(
    record_id: uuid.UUID,
    body: DemurrageStatusUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await DemurrageRecordRepository(session).update_status(record_id, body)


@router.delete("/{record_id}", status_code=204)
async def delete_demurrage_record(
    record_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await DemurrageRecordRepository(session).delete(record_id)
