"""LaytimeEntryRepository: laytime counted per charter and voyage."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.laytime_entry import LaytimeEntry
from shipman.modules.laytime.schemas import LaytimeProgressUpdate


class LaytimeEntryRepository(BaseRepository[LaytimeEntry]):
    model = LaytimeEntry

    async def list_for_charter(
        self, charter_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[LaytimeEntry]:
        return await self._list(
            LaytimeEntry.charter_detail_id == charter_id,
            order_by=[LaytimeEntry.started_at.asc()],
            timeout=timeout,
        )

    async def list_for_voyage(
        self, voyage_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[LaytimeEntry]:
        return await self._list(
            LaytimeEntry.voyage_id == voyage_id,
            order_by=[LaytimeEntry.started_at.asc()],
            timeout=timeout,
        )

    async def update_progress(
        self,
        entry_id: uuid.UUID,
        data: LaytimeProgressUpdate,
        *,
        timeout: float | None = None,
    ) -> LaytimeEntry:
        values = data.model_dump()
        return await self._patch(entry_id, values, keep_existing=values, timeout=timeout)
