"""add_pending_invitee_unique_index

Allow at most one outstanding invitation per (kind, target, invitee email).
Existing duplicates keep the newest row; older ones lose their token.

Revision ID: 9d41e7b2c6a3
Revises: 3f2c9a1d7b40
Create Date: 2026-10-20 09:31:07.204615

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d41e7b2c6a3"
down_revision: Union[str, Sequence[str], None] = "3f2c9a1d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        UPDATE invitations SET invite_token = NULL
        WHERE id IN (
            SELECT id FROM (
                SELECT id, ROW_NUMBER() OVER (
                    PARTITION BY kind, target_id, lower(invitee_email)
                    ORDER BY created_at DESC
                ) AS position
                FROM invitations
                WHERE status = 'pending'
                  AND invite_token IS NOT NULL
                  AND invitee_email IS NOT NULL
            ) ranked
            WHERE ranked.position > 1
        )
    """)

    op.create_index(
        "uq_invitations_pending_invitee",
        "invitations",
        ["kind", "target_id", sa.text("lower(invitee_email)")],
        unique=True,
        postgresql_where=sa.text("status = 'pending' AND invite_token IS NOT NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("uq_invitations_pending_invitee", table_name="invitations")
