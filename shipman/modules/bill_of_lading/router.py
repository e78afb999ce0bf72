"""Bill of lading API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.bill_of_lading.repository import BillOfLadingRepository
from shipman.modules.bill_of_lading.schemas import (
    BillOfLadingCreate,
    BillOfLadingResponse,
    BillOfLadingUpdate,
)

router = APIRouter(prefix="/bills-of-lading", tags=["bills-of-lading"])


@router.post("/", response_model=BillOfLadingResponse, status_code=201)
async def create_bill_of_lading(
    body: BillOfLadingCreate,
    session: AsyncSession = Depends(get_db),
):
    return await BillOfLadingRepository(session).create(body)


@router.get("/{bill_id}", response_model=BillOfLadingResponse)
async def get_bill_of_lading(
    bill_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await BillOfLadingRepository(session).get(bill_id)


@router.put("/{bill_id}", response_model=BillOfLadingResponse)
async def update_bill_of_lading(
    bill_id: uuid.UUID,
    body: BillOfLadingUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await BillOfLadingRepository(session).update(bill_id, body)


@router.delete("/{bill_id}", status_code=204)
async def delete_bill_of_lading(
    bill_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await BillOfLadingRepository(session).delete(bill_id)
