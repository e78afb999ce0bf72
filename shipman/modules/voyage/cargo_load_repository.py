"""CargoLoadRepository: parcels carried on a voyage."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.cargo_load import CargoLoad
from shipman.modules.voyage.schemas import CargoLoadUpdate


class CargoLoadRepository(BaseRepository[CargoLoad]):
    model = CargoLoad

    async def list_for_voyage(
        self, voyage_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[CargoLoad]:
        return await self._list(
            CargoLoad.voyage_id == voyage_id,
            order_by=[CargoLoad.created_at.desc()],
            timeout=timeout,
        )

    async def update(
        self,
        load_id: uuid.UUID,
        data: CargoLoadUpdate,
        *,
        timeout: float | None = None,
    ) -> CargoLoad:
        """Unlike most updaters, cargo updates keep stored values for absent fields."""
        values = self._update_values(data)
        return await self._patch(load_id, values, keep_existing=values, timeout=timeout)
