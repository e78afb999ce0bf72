"""PaymentRepository: amounts due and paid under a charter."""

from __future__ import annotations

import uuid
from datetime import datetime

from shipman.database.repository import BaseRepository
from shipman.models.payment import Payment


class PaymentRepository(BaseRepository[Payment]):
    model = Payment

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[Payment]:
        """Payments by due date; undated payments last, newest first among ties."""
        return await self._list(
            Payment.charter_detail_id == charter_id,
            order_by=[Payment.due_date.asc().nulls_last(), Payment.created_at.desc()],
            timeout=timeout,
        )

    async def update_status(
        self,
        payment_id: uuid.UUID,
        *,
        status: str | None = None,
        paid_at: datetime | None = None,
        timeout: float | None = None,
    ) -> Payment:
        values = {"status": status, "paid_at": paid_at}
        return await self._patch(payment_id, values, keep_existing=values, timeout=timeout)
