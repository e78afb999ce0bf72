"""Laytime entry API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.laytime.repository import LaytimeEntryRepository
from shipman.modules.laytime.schemas import (
    LaytimeEntryCreate,
    LaytimeEntryResponse,
    LaytimeEntryUpdate,
    LaytimeProgressUpdate,
)

router = APIRouter(prefix="/laytime-entries", tags=["laytime"])


@router.post("/", response_model=LaytimeEntryResponse, status_code=201)
async def create_laytime_entry(
    body: LaytimeEntryCreate,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).create(body)


@router.get("/{entry_id}", response_model=LaytimeEntryResponse)
async def get_laytime_entry(
    entry_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).get(entry_id)


@router.put("/{entry_id}", response_model=LaytimeEntryResponse)
async def update_laytime_entry(
    entry_id: uuid.UUID,
    body: LaytimeEntryUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).update(entry_id, body)


@router.patch("/{entry_id}/progress", response_model=LaytimeEntryResponse)
async def update_laytime_progress(
    entry_id: uuid.UUID,
    body: LaytimeProgressUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).update_progress(entry_id, body)


@router.delete("/{entry_id}", status_code=204)
async def delete_laytime_entry(
    entry_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await LaytimeEntryRepository(session).delete(entry_id)
