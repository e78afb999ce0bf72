"""VoyageRepository: voyages performed under a charter."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.voyage import Voyage
from shipman.modules.voyage.schemas import VoyageProgressUpdate


class VoyageRepository(BaseRepository[Voyage]):
    model = Voyage

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[Voyage]:
        """Voyages in planned sailing order; unscheduled voyages come last."""
        return await self._list(
            Voyage.charter_detail_id == charter_id,
            order_by=[
                Voyage.planned_departure_at.asc().nulls_last(),
                Voyage.created_at.desc(),
            ],
            timeout=timeout,
        )

    async def update_progress(
        self,
        voyage_id: uuid.UUID,
        data: VoyageProgressUpdate,
        *,
        timeout: float | None = None,
    ) -> Voyage:
        values = data.model_dump()
        return await self._patch(voyage_id, values, keep_existing=values, timeout=timeout)
