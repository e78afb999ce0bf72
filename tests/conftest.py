"""Shared fixtures for Shipman unit tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import asyncpg

from shipman.app import app, limiter
from shipman.database.session import get_db


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def result_of():
    """Build a fake ``Result`` whose scalar accessors return ``value``."""

    def _make(value=None, *, rows=None, rowcount=1):
        result = MagicMock()
        result.scalar_one.return_value = value
        result.scalar_one_or_none.return_value = value
        result.scalars.return_value.all.return_value = list(rows or [])
        result.rowcount = rowcount
        return result

    return _make


@pytest.fixture
def executed(mock_session):
    """Return the statement passed to the most recent ``session.execute``."""

    def _last():
        return mock_session.execute.await_args.args[0]

    return _last


@pytest.fixture
def render():
    """Compile a statement against the PostgreSQL dialect."""

    def _compile(statement):
        return statement.compile(dialect=postgresql.dialect())

    return _compile


@pytest.fixture
def driver_params():
    """Bind values after type processing, as asyncpg receives them."""

    def _process(statement):
        compiled = statement.compile(dialect=asyncpg.dialect())
        processors = compiled._bind_processors
        return {
            name: processors[name](value) if name in processors else value
            for name, value in compiled.construct_params().items()
        }

    return _process


@pytest_asyncio.fixture
async def async_client(mock_session) -> AsyncGenerator[AsyncClient, None]:
    """httpx client bound to the app, with the session dependency stubbed out."""

    async def override_get_db():
        yield mock_session

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
