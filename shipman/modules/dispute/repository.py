"""DisputeRepository: disputes raised under a charter."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.dispute import Dispute


class DisputeRepository(BaseRepository[Dispute]):
    model = Dispute

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[Dispute]:
        return await self._list(
            Dispute.charter_detail_id == charter_id,
            order_by=[Dispute.created_at.desc()],
            timeout=timeout,
        )

    async def update_status(
        self,
        dispute_id: uuid.UUID,
        *,
        status: str | None = None,
        resolution_notes: str | None = None,
        timeout: float | None = None,
    ) -> Dispute:
        values = {"status": status, "resolution_notes": resolution_notes}
        return await self._patch(dispute_id, values, keep_existing=values, timeout=timeout)
