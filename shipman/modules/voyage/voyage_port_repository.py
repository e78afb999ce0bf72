"""VoyagePortRepository: the port rotation of a voyage."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.voyage_port import VoyagePort
from shipman.modules.voyage.schemas import VoyagePortCallUpdate


class VoyagePortRepository(BaseRepository[VoyagePort]):
    model = VoyagePort

    async def list_for_voyage(
        self, voyage_id: uuid.UUID, *, timeout: float | None = None
    ) -> list[VoyagePort]:
        """Ports in the order they were visited; calls not yet made come last."""
        return await self._list(
            VoyagePort.voyage_id == voyage_id,
            order_by=[
                VoyagePort.arrived_at.asc().nulls_last(),
                VoyagePort.created_at.asc(),
            ],
            timeout=timeout,
        )

    async def update_call(
        self,
        port_id: uuid.UUID,
        data: VoyagePortCallUpdate,
        *,
        timeout: float | None = None,
    ) -> VoyagePort:
        values = data.model_dump()
        return await self._patch(port_id, values, keep_existing=values, timeout=timeout)
