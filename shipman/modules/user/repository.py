"""UserRepository: back-office accounts."""

from __future__ import annotations

import uuid

from sqlalchemy import select

from shipman.database.repository import BaseRepository
from shipman.exceptions import NotFoundException
from shipman.models.user import User
from shipman.modules.user.schemas import UserUpdate


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str, *, timeout: float | None = None) -> User:
        """Look up a user by email; the store compares case-insensitively."""
        result = await self._execute(select(User).where(User.email == email), timeout)
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundException(f"User with email {email} not found")
        return user

    async def list_users(
        self, limit: int = 50, offset: int = 0, *, timeout: float | None = None
    ) -> list[User]:
        return await self._list(
            order_by=[User.created_at.desc()], limit=limit, offset=offset, timeout=timeout
        )

    async def update(
        self, user_id: uuid.UUID, data: UserUpdate, *, timeout: float | None = None
    ) -> User:
        """Apply ``data``; absent fields keep their stored value."""
        values = data.model_dump()
        return await self._patch(user_id, values, keep_existing=values, timeout=timeout)
