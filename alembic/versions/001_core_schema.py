"""Core chartering schema: users, charters, voyages, laytime, payments, disputes

Revision ID: 001
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TRIGGERED_TABLES = (
    "users",
    "charter_details",
    "voyages",
    "voyage_ports",
    "ship_positions",
    "laytime_entries",
    "payments",
    "disputes",
)


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS shipman;")
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto";')
    op.execute('CREATE EXTENSION IF NOT EXISTS "citext";')

    # clock_timestamp() so two updates in one transaction still move forward.
    op.execute("""
        CREATE OR REPLACE FUNCTION shipman.set_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = clock_timestamp();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)

    # ── 1. users ───────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            email CITEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            full_name TEXT NOT NULL,
            role TEXT NOT NULL DEFAULT 'user',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)

    # ── 2. charter_details ─────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.charter_details (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            created_by_user_id UUID REFERENCES shipman.users(id) ON DELETE SET NULL,
            title TEXT NOT NULL,
            charter_reference_code TEXT,
            vessel_name TEXT,
            counterparty_name TEXT,
            status TEXT NOT NULL DEFAULT 'draft',
            start_date DATE,
            end_date DATE,
            laytime_allowance_hours NUMERIC(10,2),
            demurrage_rate NUMERIC(12,2),
            demurrage_currency CHAR(3),
            fuel_clause TEXT,
            payment_terms TEXT,
            ai_status TEXT NOT NULL DEFAULT 'pending',
            ai_document_path TEXT,
            ai_extracted_terms JSONB,
            last_reviewed_at TIMESTAMPTZ,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE INDEX ix_charter_details_created_at ON shipman.charter_details (created_at);"
    )

    # ── 3. voyages ─────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.voyages (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,
            voyage_number TEXT,
            vessel_name TEXT,
            departure_port TEXT,
            arrival_port TEXT,
            planned_departure_at TIMESTAMPTZ,
            planned_arrival_at TIMESTAMPTZ,
            actual_departure_at TIMESTAMPTZ,
            actual_arrival_at TIMESTAMPTZ,
            distance_nm NUMERIC(12,2),
            time_at_sea_hours NUMERIC(12,2),
            fuel_consumed_mt NUMERIC(12,2),
            fuel_type TEXT,
            weather_summary TEXT,
            status TEXT NOT NULL DEFAULT 'planned',
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX ix_voyages_charter_detail_id ON shipman.voyages (charter_detail_id);")

    # ── 4. laytime_entries ─────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.laytime_entries (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,
            voyage_id UUID REFERENCES shipman.voyages(id) ON DELETE SET NULL,
            port_name TEXT,
            activity TEXT,
            started_at TIMESTAMPTZ,
            ended_at TIMESTAMPTZ,
            hours_counted NUMERIC(10,2),
            remarks TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE INDEX ix_laytime_entries_charter_detail_id "
        "ON shipman.laytime_entries (charter_detail_id);"
    )
    op.execute("CREATE INDEX ix_laytime_entries_voyage_id ON shipman.laytime_entries (voyage_id);")

    # ── 5. voyage_ports ────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.voyage_ports (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            voyage_id UUID NOT NULL REFERENCES shipman.voyages(id) ON DELETE CASCADE,
            port_name TEXT NOT NULL,
            port_country TEXT,
            port_unlocode TEXT,
            latitude NUMERIC(9,6),
            longitude NUMERIC(9,6),
            arrived_at TIMESTAMPTZ,
            departed_at TIMESTAMPTZ,
            laytime_hours NUMERIC(10,2),
            cargo_operations TEXT,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX ix_voyage_ports_voyage_id ON shipman.voyage_ports (voyage_id);")

    # ── 6. ship_positions ──────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.ship_positions (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            voyage_id UUID NOT NULL REFERENCES shipman.voyages(id) ON DELETE CASCADE,
            recorded_at TIMESTAMPTZ NOT NULL,
            latitude NUMERIC(9,6) NOT NULL,
            longitude NUMERIC(9,6) NOT NULL,
            speed_knots NUMERIC(8,3),
            heading NUMERIC(8,3),
            distance_logged_nm NUMERIC(12,2),
            fuel_remaining_mt NUMERIC(12,2),
            source TEXT NOT NULL DEFAULT 'manual',
            remarks TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE INDEX ix_ship_positions_voyage_recorded "
        "ON shipman.ship_positions (voyage_id, recorded_at);"
    )

    # ── 7. payments ────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.payments (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,
            voyage_id UUID REFERENCES shipman.voyages(id) ON DELETE SET NULL,
            category TEXT NOT NULL DEFAULT 'general',
            due_date DATE,
            paid_at TIMESTAMPTZ,
            amount NUMERIC(12,2) NOT NULL,
            currency CHAR(3) NOT NULL DEFAULT 'USD',
            status TEXT NOT NULL DEFAULT 'pending',
            payment_method TEXT,
            reference TEXT,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX ix_payments_charter_detail_id ON shipman.payments (charter_detail_id);")

    # ── 8. disputes ────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE shipman.disputes (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,

            -- Links
            voyage_id UUID REFERENCES shipman.voyages(id) ON DELETE SET NULL,
            payment_id UUID REFERENCES shipman.payments(id) ON DELETE SET NULL,
            laytime_entry_id UUID REFERENCES shipman.laytime_entries(id) ON DELETE SET NULL,

            -- Parties
            raised_by_org_id UUID NOT NULL,
            assigned_to_org_id UUID,

            subject TEXT NOT NULL,
            description TEXT,
            claimed_amount NUMERIC(12,2),
            currency CHAR(3),
            status TEXT NOT NULL DEFAULT 'open',
            resolution_notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX ix_disputes_charter_detail_id ON shipman.disputes (charter_detail_id);")

    for table in TRIGGERED_TABLES:
        op.execute(
            f"CREATE TRIGGER trg_{table}_updated_at BEFORE UPDATE ON shipman.{table} "
            "FOR EACH ROW EXECUTE FUNCTION shipman.set_updated_at();"
        )


def downgrade() -> None:
    for table in reversed(TRIGGERED_TABLES):
        op.execute(f"DROP TRIGGER IF EXISTS trg_{table}_updated_at ON shipman.{table};")

    op.execute("DROP TABLE IF EXISTS shipman.disputes;")
    op.execute("DROP TABLE IF EXISTS shipman.payments;")
    op.execute("DROP TABLE IF EXISTS shipman.ship_positions;")
    op.execute("DROP TABLE IF EXISTS shipman.voyage_ports;")
    op.execute("DROP TABLE IF EXISTS shipman.laytime_entries;")
    op.execute("DROP TABLE IF EXISTS shipman.voyages;")
    op.execute("DROP TABLE IF EXISTS shipman.charter_details;")
    op.execute("DROP TABLE IF EXISTS shipman.users;")
    op.execute("DROP FUNCTION IF EXISTS shipman.set_updated_at();")
