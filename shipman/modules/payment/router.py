"""Payment API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.database.session import get_db
from shipman.modules.payment.repository import PaymentRepository
from shipman.modules.payment.schemas import (
    PaymentCreate,
    PaymentResponse,
    PaymentStatusUpdate,
    PaymentUpdate,
)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/", response_model=PaymentResponse, status_code=201)
async def create_payment(
    body: PaymentCreate,
    session: AsyncSession = Depends(get_db),
):
    return await PaymentRepository(session).create(body)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    return await PaymentRepository(session).get(payment_id)


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: uuid.UUID,
    body: PaymentUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await PaymentRepository(session).update(payment_id, body)


@router.patch("/{payment_id}/status", response_model=PaymentResponse)
async def update_payment_status(
    payment_id: uuid.UUID,
    body: PaymentStatusUpdate,
    session: AsyncSession = Depends(get_db),
):
    return await PaymentRepository(session).update_status(
        payment_id, status=body.status, paid_at=body.paid_at
    )


@router.delete("/{payment_id}", status_code=204)
async def delete_payment(
    payment_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> None:
    await PaymentRepository(session).delete(payment_id)
