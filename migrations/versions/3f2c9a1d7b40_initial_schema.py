"""initial_schema

Create the Liftout schema:
- Users and their skills
- Companies and company memberships
- Teams and team memberships
- Opportunities posted by companies
- Invitations (team and company, single-use tokens)

Revision ID: 3f2c9a1d7b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        server_default=None if nullable else sa.text("NOW()"),
        nullable=nullable,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column(
            "user_type",
            sa.String(20),
            server_default="individual",
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "user_type IN ('individual', 'company', 'admin')",
            name="ck_users_user_type",
        ),
    )
    op.create_index("idx_users_email", "users", ["email"], unique=True)

    op.create_table(
        "user_skills",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("skill", sa.String(100), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "skill", name="uq_user_skill"),
    )
    op.create_index("idx_user_skills_user_id", "user_skills", ["user_id"])

    # ========================================================================
    # COMPANIES
    # ========================================================================
    op.create_table(
        "companies",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(255), nullable=True),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column(
            "verification_status",
            sa.String(20),
            server_default="unverified",
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "company_users",
        _id(),
        sa.Column("company_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(20), server_default="member", nullable=False),
        _timestamp("joined_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("company_id", "user_id", name="uq_company_user"),
        sa.CheckConstraint(
            "role IN ('owner', 'admin', 'member', 'recruiter')",
            name="ck_company_users_role",
        ),
    )
    op.create_index("idx_company_users_user_id", "company_users", ["user_id"])

    # ========================================================================
    # TEAMS
    # ========================================================================
    op.create_table(
        "teams",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("industry", sa.String(255), nullable=True),
        sa.Column("specialization", sa.String(255), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column(
            "remote_status", sa.String(20), server_default="hybrid", nullable=False
        ),
        sa.Column("size", sa.Integer(), nullable=True),
        sa.Column("years_working_together", sa.Numeric(4, 1), nullable=True),
        sa.Column(
            "availability_status",
            sa.String(20),
            server_default="available",
            nullable=False,
        ),
        sa.Column(
            "verification_status",
            sa.String(20),
            server_default="unverified",
            nullable=False,
        ),
        sa.Column("visibility", sa.String(20), server_default="public", nullable=False),
        sa.Column("salary_expectation_min", sa.Integer(), nullable=True),
        sa.Column("salary_expectation_max", sa.Integer(), nullable=True),
        sa.Column("created_by", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        _timestamp("deleted_at", nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index(
        "idx_teams_discovery",
        "teams",
        ["visibility", "availability_status"],
        postgresql_where=sa.text("deleted_at IS NULL"),
    )

    op.create_table(
        "team_members",
        _id(),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(50), server_default="member", nullable=False),
        sa.Column("is_admin", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("status", sa.String(20), server_default="active", nullable=False),
        _timestamp("joined_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("team_id", "user_id", name="uq_team_member"),
    )
    op.create_index("idx_team_members_user_id", "team_members", ["user_id"])

    # ========================================================================
    # OPPORTUNITIES
    # ========================================================================
    op.create_table(
        "opportunities",
        _id(),
        sa.Column("company_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("industry", sa.String(255), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("remote_policy", sa.String(20), nullable=True),
        sa.Column("compensation_min", sa.Integer(), nullable=True),
        sa.Column("compensation_max", sa.Integer(), nullable=True),
        sa.Column(
            "compensation_currency", sa.String(3), server_default="USD", nullable=False
        ),
        sa.Column("team_size_min", sa.Integer(), nullable=True),
        sa.Column("team_size_max", sa.Integer(), nullable=True),
        sa.Column(
            "required_skills",
            postgresql.ARRAY(sa.String(100)),
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "preferred_skills",
            postgresql.ARRAY(sa.String(100)),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("urgency", sa.String(20), server_default="standard", nullable=False),
        sa.Column("status", sa.String(20), server_default="open", nullable=False),
        sa.Column("featured", sa.Boolean(), server_default="false", nullable=False),
        sa.Column(
            "application_count", sa.Integer(), server_default="0", nullable=False
        ),
        _timestamp("expires_at", nullable=True),
        sa.Column("created_by", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.CheckConstraint(
            "status IN ('open', 'filled', 'closed')", name="ck_opportunities_status"
        ),
    )
    op.create_index("idx_opportunities_status", "opportunities", ["status"])
    op.create_index("idx_opportunities_company_id", "opportunities", ["company_id"])

    # ========================================================================
    # INVITATIONS
    # ========================================================================
    op.create_table(
        "invitations",
        _id(),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("invitee_email", sa.String(255), nullable=True),
        sa.Column("invitee_user_id", sa.UUID(), nullable=True),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("invite_token", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), server_default="pending", nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        _timestamp("created_at"),
        _timestamp("responded_at", nullable=True),
        sa.Column("accepted_by_user_id", sa.UUID(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["invitee_user_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["invited_by"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["accepted_by_user_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.CheckConstraint("kind IN ('team', 'company')", name="ck_invitations_kind"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'declined')",
            name="ck_invitations_status",
        ),
    )
    # Unique over non-null tokens; consumed invitations carry NULL
    op.create_index(
        "idx_invitations_token", "invitations", ["invite_token"], unique=True
    )
    op.create_index("idx_invitations_target", "invitations", ["kind", "target_id"])
    op.create_index(
        "idx_invitations_invitee_email", "invitations", ["invitee_email"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("invitations")
    op.drop_table("opportunities")
    op.drop_table("team_members")
    op.drop_table("teams")
    op.drop_table("company_users")
    op.drop_table("companies")
    op.drop_table("user_skills")
    op.drop_table("users")
