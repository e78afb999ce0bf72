"""Fixtures for tests that need a real PostgreSQL.

Set ``TEST_DATABASE_URL`` (asyncpg DSN) to a disposable database. The schema
is built once per run by the Alembic migrations, and every test runs inside
one transaction that is rolled back afterwards.
"""

import argparse
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _alembic_config(url: str) -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    # env.py reads the target through ``-x url=...``.
    config.cmd_opts = argparse.Namespace(x=[f"url={url}"])
    return config


@pytest.fixture(scope="session")
def migrated_database() -> str:
    """Upgrade the test database to head and return its asyncpg URL."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    sync_url = (
        make_url(TEST_DATABASE_URL)
        .set(drivername="postgresql+psycopg2")
        .render_as_string(hide_password=False)
    )
    try:
        command.upgrade(_alembic_config(sync_url), "head")
    except (sa_exc.OperationalError, sa_exc.InterfaceError, OSError) as exc:
        pytest.skip(f"PostgreSQL unreachable: {exc}")
    return TEST_DATABASE_URL


@pytest_asyncio.fixture
async def db_session(migrated_database: str) -> AsyncGenerator[AsyncSession, None]:
    test_engine = create_async_engine(migrated_database, echo=False)
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()

    await test_engine.dispose()
