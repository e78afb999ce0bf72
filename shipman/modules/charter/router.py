"""Charter API router: charter parties and everything filed under them."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.bill_of_lading.repository import BillOfLadingRepository
from shipman.modules.bill_of_lading.schemas import BillOfLadingResponse
from shipman.modules.charter.repository import CharterDetailRepository
from shipman.modules.charter.schemas import (
    CharterAiUpdate,
    CharterCreate,
    CharterListResponse,
    CharterResponse,
    CharterStatusUpdate,
    CharterUpdate,
)
from shipman.modules.demurrage.repository import DemurrageRecordRepository
from shipman.modules.demurrage.schemas import DemurrageRecordResponse
from shipman.modules.dispute.repository import DisputeRepository
from shipman.modules.dispute.schemas import DisputeResponse
from shipman.modules.laytime.repository import LaytimeEntryRepository
from shipman.modules.laytime.schemas import LaytimeEntryResponse
from shipman.modules.payment.repository import PaymentRepository
from shipman.modules.payment.schemas import PaymentResponse
from shipman.modules.voyage.schemas import VoyageResponse
from shipman.modules.voyage.voyage_repository import VoyageRepository

router = APIRouter(prefix="/charters", tags=["charters"])


@router.get("/", response_model=CharterListResponse)
async def list_charters(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db),
):
    charters = await CharterDetailRepository(session).list_charters(limit=limit, offset=offset)
    return CharterListResponse(
        items=[CharterResponse.model_validate(c) for c in charters],
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=CharterResponse, status_code=201)
async def create_charter(
    body: CharterCreate,
    session: AsyncSession = Depends(get_db),
):
    return await CharterDetailRepository(session).create(body)


@router.get("/{charter_id}", response_model=CharterResponse)
async def get_charter(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await CharterDetailRepository(session).get(charter_id)


@router.put("/{charter_id}", response_model=CharterResponse)
async def update_charter(
    charter_id: uuid.UUID,
    body: CharterUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await CharterDetailRepository(session).update(charter_id, body)


@router.patch("/{charter_id}/status", response_model=CharterResponse)
async def update_charter_status(
    charter_id: uuid.UUID,
    body: CharterStatusUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await CharterDetailRepository(session).update_status(charter_id, body.status)


@router.patch("/{charter_id}/ai", response_model=CharterResponse)
async def update_charter_ai(
    charter_id: uuid.UUID,
    body: CharterAiUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await CharterDetailRepository(session).update_ai(charter_id, **body.model_dump())


@router.delete("/{charter_id}", status_code=204)
async def delete_charter(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await CharterDetailRepository(session).delete(charter_id)


# ---------------------------------------------------------------------------
# Nested listings
# ---------------------------------------------------------------------------


@router.get("/{charter_id}/voyages", response_model=list[VoyageResponse])
async def list_charter_voyages(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await VoyageRepository(session).list_for_charter(charter_id)


@router.get("/{charter_id}/laytime", response_model=list[LaytimeEntryResponse])
async def list_charter_laytime(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await LaytimeEntryRepository(session).list_for_charter(charter_id)


@router.get("/{charter_id}/payments", response_model=list[PaymentResponse])
async def list_charter_payments(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await PaymentRepository(session).list_for_charter(charter_id)


@router.get("/{charter_id}/disputes", response_model=list[DisputeResponse])
async def list_charter_disputes(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await DisputeRepository(session).list_for_charter(charter_id)


@router.get("/{charter_id}/bills-of-lading", response_model=list[BillOfLadingResponse])
async def list_charter_bills_of_lading(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await BillOfLadingRepository(session).list_for_charter(charter_id)


@router.get("/{charter_id}/demurrage", response_model=list[DemurrageRecordResponse])
async def list_charter_demurrage(
    charter_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await DemurrageRecordRepository(session).list_for_charter(charter_id)
