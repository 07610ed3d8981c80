"""SQLAlchemy table definitions for Liftout.

Repositories use these with SQLAlchemy Core. They match the schema
created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
    and_,
    func,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("user_type", String(20), nullable=False, server_default="individual"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "user_type IN ('individual', 'company', 'admin')", name="ck_users_user_type"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

user_skills_table = Table(
    "user_skills",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("skill", String(100), nullable=False),
    UniqueConstraint("user_id", "skill", name="uq_user_skill"),
)

Index("idx_user_skills_user_id", user_skills_table.c.user_id)

# ============================================================================
# COMPANIES
# ============================================================================
companies_table = Table(
    "companies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("industry", String(255), nullable=True),
    Column("logo_url", Text, nullable=True),
    Column(
        "verification_status", String(20), nullable=False, server_default="unverified"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

company_users_table = Table(
    "company_users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "company_id",
        UUID,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(20), nullable=False, server_default="member"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("company_id", "user_id", name="uq_company_user"),
    CheckConstraint(
        "role IN ('owner', 'admin', 'member', 'recruiter')", name="ck_company_users_role"
    ),
)

Index("idx_company_users_user_id", company_users_table.c.user_id)

# ============================================================================
# TEAMS
# ============================================================================
teams_table = Table(
    "teams",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("industry", String(255), nullable=True),
    Column("specialization", String(255), nullable=True),
    Column("location", String(255), nullable=True),
    Column("remote_status", String(20), nullable=False, server_default="hybrid"),
    Column("size", Integer, nullable=True),
    Column("years_working_together", Numeric(4, 1), nullable=True),
    Column(
        "availability_status", String(20), nullable=False, server_default="available"
    ),
    Column(
        "verification_status", String(20), nullable=False, server_default="unverified"
    ),
    Column("visibility", String(20), nullable=False, server_default="public"),
    Column("salary_expectation_min", Integer, nullable=True),
    Column("salary_expectation_max", Integer, nullable=True),
    Column("created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_teams_discovery",
    teams_table.c.visibility,
    teams_table.c.availability_status,
    postgresql_where=teams_table.c.deleted_at.is_(None),
)

team_members_table = Table(
    "team_members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(50), nullable=False, server_default="member"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("team_id", "user_id", name="uq_team_member"),
)

Index("idx_team_members_user_id", team_members_table.c.user_id)

# ============================================================================
# OPPORTUNITIES
# ============================================================================
opportunities_table = Table(
    "opportunities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "company_id",
        UUID,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("industry", String(255), nullable=True),
    Column("location", String(255), nullable=True),
    Column("remote_policy", String(20), nullable=True),
    Column("compensation_min", Integer, nullable=True),
    Column("compensation_max", Integer, nullable=True),
    Column("compensation_currency", String(3), nullable=False, server_default="USD"),
    Column("team_size_min", Integer, nullable=True),
    Column("team_size_max", Integer, nullable=True),
    Column(
        "required_skills",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "preferred_skills",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column("urgency", String(20), nullable=False, server_default="standard"),
    Column("status", String(20), nullable=False, server_default="open"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column("application_count", Integer, nullable=False, server_default="0"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('open', 'filled', 'closed')", name="ck_opportunities_status"
    ),
)

Index("idx_opportunities_status", opportunities_table.c.status)
Index("idx_opportunities_company_id", opportunities_table.c.company_id)

# ============================================================================
# INVITATIONS
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("kind", String(20), nullable=False),  # 'team' or 'company'
    Column("target_id", UUID, nullable=False),  # teams.id or companies.id
    Column("role", String(50), nullable=False),
    Column("invitee_email", String(255), nullable=True),
    Column(
        "invitee_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("message", Text, nullable=True),
    Column("invite_token", String(255), nullable=True),  # NULL once consumed
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    CheckConstraint("kind IN ('team', 'company')", name="ck_invitations_kind"),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'declined')", name="ck_invitations_status"
    ),
)

Index("idx_invitations_token", invitations_table.c.invite_token, unique=True)
Index(
    "idx_invitations_target",
    invitations_table.c.kind,
    invitations_table.c.target_id,
)
Index("idx_invitations_invitee_email", invitations_table.c.invitee_email)

# One outstanding invitation per invitee and target
Index(
    "uq_invitations_pending_invitee",
    invitations_table.c.kind,
    invitations_table.c.target_id,
    func.lower(invitations_table.c.invitee_email),
    unique=True,
    postgresql_where=and_(
        invitations_table.c.status == "pending",
        invitations_table.c.invite_token.is_not(None),
    ),
)
