"""Create announcements table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `announcements` table and inserts the three sample rows.
How:   Plain INT AUTO_INCREMENT key and VARCHAR(255) message, matching the
       Announcement model. Seeding happens here so a fresh store comes up
       with ids 1..3.

Rollback: downgrade() drops the table (all announcements are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from announcer.store import SEED_MESSAGES

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    announcements = op.create_table(
        "announcements",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("message", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.bulk_insert(
        announcements,
        [{"message": message} for message in SEED_MESSAGES],
    )


def downgrade() -> None:
    op.drop_table("announcements")
