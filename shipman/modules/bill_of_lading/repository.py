"""BillOfLadingRepository: cargo receipt documents for a charter."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.bill_of_lading import BillOfLading


class BillOfLadingRepository(BaseRepository[BillOfLading]):
    model = BillOfLading

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[BillOfLading]:
        return await self._list(
            BillOfLading.charter_detail_id == charter_id,
            order_by=[
                BillOfLading.issue_date.asc().nulls_last(),
                BillOfLading.created_at.desc(),
            ],
            timeout=timeout,
        )
