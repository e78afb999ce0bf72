from shipman.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from shipman.database.engine import async_session, engine
from shipman.database.repository import BaseRepository
from shipman.database.session import get_db, session_scope

__all__ = [
    "Base",
    "BaseRepository",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "async_session",
    "engine",
    "get_db",
    "session_scope",
]
