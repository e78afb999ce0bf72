"""Cargo loads per voyage

Revision ID: 005
Revises: 004
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE shipman.cargo_loads (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            voyage_id UUID NOT NULL REFERENCES shipman.voyages(id) ON DELETE CASCADE,
            load_port TEXT,
            discharge_port TEXT,
            commodity TEXT,
            quantity NUMERIC(12,2),
            unit TEXT,
            stowage_plan JSONB,
            hazardous BOOLEAN,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX ix_cargo_loads_voyage_id ON shipman.cargo_loads (voyage_id);")
    op.execute(
        "CREATE TRIGGER trg_cargo_loads_updated_at BEFORE UPDATE ON shipman.cargo_loads "
        "FOR EACH ROW EXECUTE FUNCTION shipman.set_updated_at();"
    )


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS trg_cargo_loads_updated_at ON shipman.cargo_loads;")
    op.execute("DROP TABLE IF EXISTS shipman.cargo_loads;")
