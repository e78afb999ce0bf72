"""Vessel registry

Revision ID: 004
Revises: 003
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE shipman.vessels (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name TEXT NOT NULL,
            imo_number TEXT UNIQUE,
            flag_state TEXT,
            vessel_type TEXT,
            call_sign TEXT,
            deadweight_tonnage NUMERIC(12,2),
            gross_tonnage NUMERIC(12,2),
            net_tonnage NUMERIC(12,2),
            capacity JSONB,
            build_year SMALLINT,
            class_society TEXT,
            owner TEXT,
            manager TEXT,
            documentation_uri TEXT,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE TRIGGER trg_vessels_updated_at BEFORE UPDATE ON shipman.vessels "
        "FOR EACH ROW EXECUTE FUNCTION shipman.set_updated_at();"
    )


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS trg_vessels_updated_at ON shipman.vessels;")
    op.execute("DROP TABLE IF EXISTS shipman.vessels;")
