"""Store-level behaviour: defaults, cascades, uniqueness, ordering, timestamps."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import text

from shipman.exceptions import ConstraintViolationException, NotFoundException
from shipman.modules.charter.repository import CharterDetailRepository
from shipman.modules.charter.schemas import CharterCreate
from shipman.modules.laytime.repository import LaytimeEntryRepository
from shipman.modules.laytime.schemas import LaytimeEntryCreate
from shipman.modules.payment.repository import PaymentRepository
from shipman.modules.payment.schemas import PaymentCreate
from shipman.modules.user.repository import UserRepository
from shipman.modules.user.schemas import UserCreate, UserUpdate
from shipman.modules.vessel.repository import VesselRepository
from shipman.modules.vessel.schemas import VesselCreate, VesselUpdate
from shipman.modules.voyage.schemas import ShipPositionCreate, VoyageCreate, VoyagePortCreate
from shipman.modules.voyage.ship_position_repository import ShipPositionRepository
from shipman.modules.voyage.voyage_port_repository import VoyagePortRepository
from shipman.modules.voyage.voyage_repository import VoyageRepository


async def _charter(session):
    return await CharterDetailRepository(session).create(CharterCreate(title="Integration charter"))


@pytest.mark.asyncio
async def test_charter_defaults(db_session):
    charter = await _charter(db_session)

    assert charter.status == "draft"
    assert charter.ai_status == "pending"
    assert isinstance(charter.id, uuid.UUID)


@pytest.mark.asyncio
async def test_payment_defaults(db_session):
    charter = await _charter(db_session)

    payment = await PaymentRepository(db_session).create(
        PaymentCreate(charter_detail_id=charter.id, amount=Decimal("980.50"))
    )

    assert (payment.category, payment.currency, payment.status) == ("general", "USD", "pending")
    assert payment.amount == Decimal("980.50")


@pytest.mark.asyncio
async def test_charter_delete_cascades(db_session):
    charter = await _charter(db_session)
    voyage = await VoyageRepository(db_session).create(VoyageCreate(charter_detail_id=charter.id))
    payment = await PaymentRepository(db_session).create(
        PaymentCreate(charter_detail_id=charter.id, amount=Decimal("1"))
    )

    await CharterDetailRepository(db_session).delete(charter.id)

    with pytest.raises(NotFoundException):
        await VoyageRepository(db_session).get(voyage.id)
    with pytest.raises(NotFoundException):
        await PaymentRepository(db_session).get(payment.id)


@pytest.mark.asyncio
async def test_voyage_delete_detaches_laytime_and_removes_children(db_session):
    charter = await _charter(db_session)
    voyage = await VoyageRepository(db_session).create(VoyageCreate(charter_detail_id=charter.id))
    entry = await LaytimeEntryRepository(db_session).create(
        LaytimeEntryCreate(charter_detail_id=charter.id, voyage_id=voyage.id, port_name="Santos")
    )
    port = await VoyagePortRepository(db_session).create(
        VoyagePortCreate(voyage_id=voyage.id, port_name="Santos")
    )
    position = await ShipPositionRepository(db_session).create(
        ShipPositionCreate(
            voyage_id=voyage.id,
            recorded_at=datetime.now(UTC),
            latitude=Decimal("-23.96"),
            longitude=Decimal("-46.33"),
        )
    )

    await VoyageRepository(db_session).delete(voyage.id)

    survivor = await LaytimeEntryRepository(db_session).get(entry.id)
    assert survivor.voyage_id is None
    assert await VoyagePortRepository(db_session).list_for_voyage(voyage.id) == []
    with pytest.raises(NotFoundException):
        await ShipPositionRepository(db_session).get(position.id)
    with pytest.raises(NotFoundException):
        await VoyagePortRepository(db_session).get(port.id)


@pytest.mark.asyncio
async def test_unknown_ids_are_not_found(db_session):
    missing = uuid.uuid4()

    with pytest.raises(NotFoundException):
        await VesselRepository(db_session).get(missing)
    with pytest.raises(NotFoundException):
        await VesselRepository(db_session).update(missing, VesselUpdate(name="Ghost"))
    await VesselRepository(db_session).delete(missing)


@pytest.mark.asyncio
async def test_duplicate_imo_number_is_a_constraint_violation(db_session):
    imo = str(uuid.uuid4().int)[:7]
    await VesselRepository(db_session).create(VesselCreate(name="MV One", imo_number=imo))

    with pytest.raises(ConstraintViolationException):
        await VesselRepository(db_session).create(VesselCreate(name="MV Two", imo_number=imo))


@pytest.mark.asyncio
async def test_email_lookup_is_case_insensitive(db_session):
    email = f"ops-{uuid.uuid4().hex[:8]}@Example.com"
    user = await UserRepository(db_session).create(
        UserCreate(email=email, password_hash="x", full_name="Ops Desk")
    )

    found = await UserRepository(db_session).get_by_email(email.lower())

    assert found.id == user.id
    assert found.role == "user"


@pytest.mark.asyncio
async def test_update_moves_updated_at_forward(db_session):
    user = await UserRepository(db_session).create(
        UserCreate(email=f"{uuid.uuid4().hex[:8]}@shipman.test", password_hash="x", full_name="A")
    )
    user_id, created_at, first_updated = user.id, user.created_at, user.updated_at

    updated = await UserRepository(db_session).update(user_id, UserUpdate(full_name="B"))

    assert updated.id == user_id
    assert updated.created_at == created_at
    assert updated.updated_at > first_updated
    assert updated.full_name == "B"
    assert updated.password_hash == "x"


@pytest.mark.asyncio
async def test_plain_sql_update_moves_updated_at_through_trigger(db_session):
    user = await UserRepository(db_session).create(
        UserCreate(email=f"{uuid.uuid4().hex[:8]}@shipman.test", password_hash="x", full_name="A")
    )
    first_updated = user.updated_at

    result = await db_session.execute(
        text("UPDATE shipman.users SET full_name = 'C' WHERE id = :id RETURNING updated_at"),
        {"id": user.id},
    )

    assert result.scalar_one() > first_updated


@pytest.mark.asyncio
async def test_voyages_list_by_planned_departure_nulls_last(db_session):
    charter = await _charter(db_session)
    repo = VoyageRepository(db_session)
    base = datetime(2026, 3, 1, tzinfo=UTC)
    late = await repo.create(
        VoyageCreate(charter_detail_id=charter.id, planned_departure_at=base + timedelta(days=5))
    )
    unscheduled = await repo.create(VoyageCreate(charter_detail_id=charter.id))
    early = await repo.create(VoyageCreate(charter_detail_id=charter.id, planned_departure_at=base))

    voyages = await repo.list_for_charter(charter.id)

    assert [v.id for v in voyages] == [early.id, late.id, unscheduled.id]
