"""create_bookings_table

Revision ID: 4b7e2c91a0d3
Revises: 
Create Date: 2026-10-12 09:14:32.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91a0d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE bookings (
            id SERIAL PRIMARY KEY,
            place_id TEXT NOT NULL,
            court_no INTEGER,
            phone_no TEXT,
            email TEXT,
            user_id INTEGER NOT NULL,
            start_time TIMESTAMPTZ,
            end_time TIMESTAMPTZ
        )
    """)

    # B-tree index for per-user listing
    op.execute("""
        CREATE INDEX idx_bookings_user_id
        ON bookings (user_id)
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS idx_bookings_user_id")
    op.execute("DROP TABLE IF EXISTS bookings")
