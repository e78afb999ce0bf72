"""ShipPositionRepository: position reports for a voyage."""

from __future__ import annotations

import uuid

from shipman.database.repository import BaseRepository
from shipman.models.ship_position import ShipPosition


class ShipPositionRepository(BaseRepository[ShipPosition]):
    model = ShipPosition

    async def list_for_voyage(
        self,
        voyage_id: uuid.UUID,
        limit: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[ShipPosition]:
        """Latest positions first; ``limit`` of ``None`` or 0 returns the full track."""
        return await self._list(
            ShipPosition.voyage_id == voyage_id,
            order_by=[ShipPosition.recorded_at.desc()],
            limit=limit or None,
            timeout=timeout,
        )
