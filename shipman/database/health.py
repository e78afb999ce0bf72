"""Store liveness check used by the /healthz endpoint."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from shipman.config import settings

logger = logging.getLogger(__name__)


async def ping(engine: AsyncEngine, timeout: float | None = None) -> str | None:
    """Run ``SELECT 1`` on a pooled connection.

    Returns ``None`` when the store answered, otherwise a short description of
    the failure. Never raises for store errors so callers can report
    unhealthy and keep serving.
    """
    deadline = timeout if timeout is not None else settings.health_check_timeout_seconds
    try:
        async with asyncio.timeout(deadline):
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
    except TimeoutError:
        logger.warning("Database ping timed out after %.1fs", deadline)
        return f"ping timed out after {deadline}s"
    except Exception as exc:
        logger.warning("Database ping failed: %s", exc)
        return str(exc) or exc.__class__.__name__
    return None
