"""CharterDetailRepository: charter parties and their AI extraction state."""

from __future__ import annotations

import uuid
from datetime import datetime

from shipman.database.repository import BaseRepository
from shipman.models.charter_detail import CharterDetail


class CharterDetailRepository(BaseRepository[CharterDetail]):
    model = CharterDetail

    async def list_charters(
        self, limit: int = 50, offset: int = 0, *, timeout: float | None = None
    ) -> list[CharterDetail]:
        return await self._list(
            order_by=[CharterDetail.created_at.desc()],
            limit=limit,
            offset=offset,
            timeout=timeout,
        )

    async def update_status(
        self, charter_id: uuid.UUID, status: str, *, timeout: float | None = None
    ) -> CharterDetail:
        """Overwrite the status only. No transition rules are applied."""
        return await self._patch(charter_id, {"status": status}, timeout=timeout)

    async def update_ai(
        self,
        charter_id: uuid.UUID,
        *,
        ai_status: str | None = None,
        ai_document_path: str | None = None,
        ai_extracted_terms: dict | None = None,
        last_reviewed_at: datetime | None = None,
        timeout: float | None = None,
    ) -> CharterDetail:
        """Record AI processing progress, keeping stored values for absent fields."""
        values = {
            "ai_status": ai_status,
            "ai_document_path": ai_document_path,
            "ai_extracted_terms": ai_extracted_terms,
            "last_reviewed_at": last_reviewed_at,
        }
        return await self._patch(charter_id, values, keep_existing=values, timeout=timeout)
