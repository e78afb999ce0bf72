"""Demurrage records

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE shipman.demurrage_records (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,
            voyage_id UUID REFERENCES shipman.voyages(id) ON DELETE SET NULL,
            laytime_entry_id UUID REFERENCES shipman.laytime_entries(id) ON DELETE SET NULL,
            claimed_hours NUMERIC(10,2),
            claimed_amount NUMERIC(12,2),
            currency CHAR(3) NOT NULL DEFAULT 'USD',
            status TEXT NOT NULL DEFAULT 'draft',
            reference TEXT,
            supporting_doc_uri TEXT,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE INDEX ix_demurrage_records_charter_detail_id "
        "ON shipman.demurrage_records (charter_detail_id);"
    )
    op.execute(
        "CREATE TRIGGER trg_demurrage_records_updated_at BEFORE UPDATE ON shipman.demurrage_records "
        "FOR EACH ROW EXECUTE FUNCTION shipman.set_updated_at();"
    )


def downgrade() -> None:
    op.execute(
        "DROP TRIGGER IF EXISTS trg_demurrage_records_updated_at ON shipman.demurrage_records;"
    )
    op.execute("DROP TABLE IF EXISTS shipman.demurrage_records;")
