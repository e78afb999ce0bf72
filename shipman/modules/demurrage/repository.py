"""DemurrageRecordRepository: demurrage claims for a charter."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.demurrage_record import DemurrageRecord
from shipman.modules.demurrage.schemas import DemurrageStatusUpdate


class DemurrageRecordRepository(BaseRepository[DemurrageRecord]):
    model = DemurrageRecord

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[DemurrageRecord]:
        return await self._list(
            DemurrageRecord.charter_detail_id == charter_id,
            order_by=[DemurrageRecord.created_at.desc()],
            timeout=timeout,
        )

    async def update_status(
        self,
        record_id: uuid.UUID,
        data: DemurrageStatusUpdate,
        *,
        timeout: float | None = None,
    ) -> DemurrageRecord:
        values = data.model_dump()
        return await self._patch(record_id, values, keep_existing=values, timeout=timeout)
