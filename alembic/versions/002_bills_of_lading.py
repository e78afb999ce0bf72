"""Bills of lading

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE shipman.bills_of_lading (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            charter_detail_id UUID NOT NULL
                REFERENCES shipman.charter_details(id) ON DELETE CASCADE,
            voyage_id UUID REFERENCES shipman.voyages(id) ON DELETE SET NULL,
            document_number TEXT NOT NULL,
            issue_date DATE,
            issuer TEXT,
            consignee TEXT,
            notify_party TEXT,
            cargo_description TEXT,
            quantity NUMERIC(12,2),
            quantity_unit TEXT,
            storage_uri TEXT,
            checksum TEXT,
            encrypted_key BYTEA,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute(
        "CREATE INDEX ix_bills_of_lading_charter_detail_id "
        "ON shipman.bills_of_lading (charter_detail_id);"
    )
    op.execute(
        "CREATE TRIGGER trg_bills_of_lading_updated_at BEFORE UPDATE ON shipman.bills_of_lading "
        "FOR EACH ROW EXECUTE FUNCTION shipman.set_updated_at();"
    )


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS trg_bills_of_lading_updated_at ON shipman.bills_of_lading;")
    op.execute("DROP TABLE IF EXISTS shipman.bills_of_lading;")
