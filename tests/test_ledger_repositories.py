"""Tests for the charter-scoped ledgers: laytime, payments, disputes, B/Ls, demurrage."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from shipman.models import BillOfLading, DemurrageRecord, Dispute, LaytimeEntry, Payment
from shipman.modules.bill_of_lading.repository import BillOfLadingRepository
from shipman.modules.bill_of_lading.schemas import BillOfLadingCreate
from shipman.modules.demurrage.repository import DemurrageRecordRepository
from shipman.modules.demurrage.schemas import DemurrageRecordCreate, DemurrageStatusUpdate
from shipman.modules.dispute.repository import DisputeRepository
from shipman.modules.dispute.schemas import DisputeCreate, DisputeUpdate
from shipman.modules.laytime.repository import LaytimeEntryRepository
from shipman.modules.laytime.schemas import LaytimeProgressUpdate
from shipman.modules.payment.repository import PaymentRepository


class TestLaytimeEntryRepository:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, column",
        [("list_for_charter", "charter_detail_id"), ("list_for_voyage", "voyage_id")],
    )
    async def test_listings_run_in_start_order(
        self, mock_session, result_of, executed, render, method, column
    ):
        mock_session.execute.return_value = result_of(rows=[])

        await getattr(LaytimeEntryRepository(mock_session), method)(uuid.uuid4())

        sql = str(render(executed()))
        assert f"WHERE shipman.laytime_entries.{column} =" in sql
        assert "ORDER BY shipman.laytime_entries.started_at ASC" in sql

    @pytest.mark.asyncio
    async def test_update_progress_keeps_stored_values(
        self, mock_session, result_of, executed, render
    ):
        entry = LaytimeEntry(id=uuid.uuid4(), charter_detail_id=uuid.uuid4())
        mock_session.execute.return_value = result_of(entry)

        await LaytimeEntryRepository(mock_session).update_progress(
            entry.id, LaytimeProgressUpdate(hours_counted=Decimal("36.5"))
        )

        sql = str(render(executed()))
        for column in ("ended_at", "hours_counted", "remarks"):
            assert f"{column}=coalesce(" in sql
        assert "started_at=" not in sql


class TestPaymentRepository:
    @pytest.mark.asyncio
    async def test_list_for_charter_by_due_date(self, mock_session, result_of, executed, render):
        mock_session.execute.return_value = result_of(rows=[])

        await PaymentRepository(mock_session).list_for_charter(uuid.uuid4())

        sql = str(render(executed()))
        assert sql.index("due_date ASC NULLS LAST") < sql.index("created_at DESC")

    @pytest.mark.asyncio
    async def test_update_status_keeps_absent_paid_at(self, mock_session, result_of, executed, render):
        payment = Payment(id=uuid.uuid4(), status="pending")
        mock_session.execute.return_value = result_of(payment)

        await PaymentRepository(mock_session).update_status(payment.id, status="paid")

        compiled = render(executed())
        sql = str(compiled)
        assert "status=coalesce(" in sql
        assert "paid_at=coalesce(" in sql
        assert "paid" in compiled.params.values()


class TestDisputeRepository:
    @pytest.mark.asyncio
    async def test_create_defaults_status_to_store(self, mock_session, result_of, executed, render):
        dispute = Dispute(id=uuid.uuid4(), status="open")
        mock_session.execute.return_value = result_of(dispute)

        await DisputeRepository(mock_session).create(
            DisputeCreate(
                charter_detail_id=uuid.uuid4(),
                raised_by_org_id=uuid.uuid4(),
                subject="Short delivery at Qingdao",
            )
        )

        params = render(executed()).params
        assert "status" not in params
        assert params["subject"] == "Short delivery at Qingdao"

    @pytest.mark.asyncio
    async def test_full_update_never_touches_raising_party(
        self, mock_session, result_of, executed, render
    ):
        dispute = Dispute(id=uuid.uuid4())
        mock_session.execute.return_value = result_of(dispute)

        await DisputeRepository(mock_session).update(
            dispute.id, DisputeUpdate(subject="Revised", status="under_review")
        )

        params = render(executed()).params
        assert "raised_by_org_id" not in params
        assert "charter_detail_id" not in params
        assert params["status"] == "under_review"

    @pytest.mark.asyncio
    async def test_update_status_allows_any_transition(
        self, mock_session, result_of, executed, render
    ):
        dispute = Dispute(id=uuid.uuid4(), status="closed")
        mock_session.execute.return_value = result_of(dispute)

        await DisputeRepository(mock_session).update_status(dispute.id, status="open")

        assert "open" in render(executed()).params.values()


class TestBillOfLadingRepository:
    @pytest.mark.asyncio
    async def test_empty_key_is_stored_as_absent(self, mock_session, result_of, executed, render):
        mock_session.execute.return_value = result_of(BillOfLading(id=uuid.uuid4()))

        await BillOfLadingRepository(mock_session).create(
            BillOfLadingCreate(charter_detail_id=uuid.uuid4(), document_number="BL-001", encrypted_key=b"")
        )

        compiled = render(executed())
        bind = compiled.binds["encrypted_key"]
        assert bind.type.process_bind_param(bind.value, None) is None

    @pytest.mark.asyncio
    async def test_list_for_charter_by_issue_date(self, mock_session, result_of, executed, render):
        mock_session.execute.return_value = result_of(rows=[])

        await BillOfLadingRepository(mock_session).list_for_charter(uuid.uuid4())

        sql = str(render(executed()))
        assert sql.index("issue_date ASC NULLS LAST") < sql.index("created_at DESC")


class TestDemurrageRecordRepository:
    @pytest.mark.asyncio
    async def test_create_leaves_currency_and_status_to_store(
        self, mock_session, result_of, executed, render
    ):
        mock_session.execute.return_value = result_of(DemurrageRecord(id=uuid.uuid4()))

        await DemurrageRecordRepository(mock_session).create(
            DemurrageRecordCreate(charter_detail_id=uuid.uuid4(), claimed_hours=Decimal("12"))
        )

        params = render(executed()).params
        assert "currency" not in params
        assert "status" not in params

    @pytest.mark.asyncio
    async def test_update_status_keeps_seven_fields(self, mock_session, result_of, executed, render):
        record = DemurrageRecord(id=uuid.uuid4(), status="draft", updated_at=datetime.now(UTC))
        mock_session.execute.return_value = result_of(record)

        await DemurrageRecordRepository(mock_session).update_status(
            record.id, DemurrageStatusUpdate(status="submitted")
        )

        sql = str(render(executed()))
        assert sql.lower().count("coalesce(") == 7
