"""VesselRepository: CRUD for the vessel registry."""

from __future__ import annotations

from shipman.database.repository import BaseRepository
from shipman.models.vessel import Vessel


class VesselRepository(BaseRepository[Vessel]):
    model = Vessel

    async def list_vessels(
        self, limit: int = 50, offset: int = 0, *, timeout: float | None = None
    ) -> list[Vessel]:
        return await self._list(
            order_by=[Vessel.created_at.desc()], limit=limit, offset=offset, timeout=timeout
        )
