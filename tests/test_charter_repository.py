"""Tests for CharterDetailRepository."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest

from shipman.models.charter_detail import CharterDetail
from shipman.modules.charter.repository import CharterDetailRepository
from shipman.modules.charter.schemas import CharterCreate


@pytest.fixture
def charter():
    now = datetime.now(UTC)
    return CharterDetail(
        id=uuid.uuid4(),
        title="Baltic Time Charter",
        status="draft",
        ai_status="pending",
        created_at=now,
        updated_at=now,
    )


@pytest.mark.asyncio
async def test_create_leaves_status_defaults_to_store(
    mock_session, result_of, executed, render, charter
):
    mock_session.execute.return_value = result_of(charter)

    created = await CharterDetailRepository(mock_session).create(
        CharterCreate(title="Baltic Time Charter")
    )

    params = render(executed()).params
    assert "status" not in params
    assert "ai_status" not in params
    assert created.status == "draft"
    assert created.ai_status == "pending"


@pytest.mark.asyncio
async def test_list_charters_newest_first_with_paging(mock_session, result_of, executed, render, charter):
    mock_session.execute.return_value = result_of(rows=[charter])

    charters = await CharterDetailRepository(mock_session).list_charters(limit=10, offset=20)

    assert charters == [charter]
    compiled = render(executed())
    sql = str(compiled)
    assert "ORDER BY shipman.charter_details.created_at DESC" in sql
    assert "LIMIT" in sql
    assert "OFFSET" in sql
    assert 10 in compiled.params.values()
    assert 20 in compiled.params.values()


@pytest.mark.asyncio
async def test_update_status_overwrites_unconditionally(
    mock_session, result_of, executed, render, charter
):
    mock_session.execute.return_value = result_of(charter)

    await CharterDetailRepository(mock_session).update_status(charter.id, "active")

    compiled = render(executed())
    sql = str(compiled)
    assert "coalesce" not in sql.lower()
    assert "updated_at=clock_timestamp()" in sql
    assert compiled.params["status"] == "active"


@pytest.mark.asyncio
async def test_update_ai_keeps_stored_values_for_absent_fields(
    mock_session, result_of, executed, render, charter
):
    mock_session.execute.return_value = result_of(charter)

    await CharterDetailRepository(mock_session).update_ai(charter.id, ai_status="completed")

    compiled = render(executed())
    sql = str(compiled)
    for column in ("ai_status", "ai_document_path", "ai_extracted_terms", "last_reviewed_at"):
        assert f"{column}=coalesce(" in sql
    assert "completed" in compiled.params.values()


@pytest.mark.asyncio
async def test_update_ai_without_terms_keeps_stored_document(
    mock_session, result_of, executed, driver_params, charter
):
    mock_session.execute.return_value = result_of(charter)

    await CharterDetailRepository(mock_session).update_ai(charter.id, ai_status="processing")

    params = driver_params(executed())
    assert "processing" in params.values()
    assert "null" not in params.values()
    assert None in params.values()
