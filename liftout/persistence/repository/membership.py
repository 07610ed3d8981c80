"""PostgreSQL implementation of Membership repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from liftout.domain.model import CompanyUser, TeamMember
from liftout.domain.repository import MembershipRepository
from liftout.domain.value import CompanyId, TeamId, UserId
from liftout.persistence.mappers import (
    company_user_to_dict,
    row_to_company_user,
    row_to_team_member,
    team_member_to_dict,
)
from liftout.persistence.tables import company_users_table, team_members_table


class PostgresMembershipRepository(MembershipRepository):
    """PostgreSQL implementation of MembershipRepository.

    Adds are upserts on the (team, user) and (company, user) unique
    constraints, so re-activating a membership keeps its row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_team_member(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamMember]:
        stmt = select(team_members_table).where(
            and_(
                team_members_table.c.team_id == team_id,
                team_members_table.c.user_id == user_id,
                team_members_table.c.status == "active",
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_team_member(dict(row)) if row else None

    async def add_team_member(self, member: TeamMember) -> TeamMember:
        values = team_member_to_dict(member)
        stmt = (
            insert(team_members_table)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_team_member",
                set_={
                    "role": values["role"],
                    "is_admin": values["is_admin"],
                    "status": "active",
                    "joined_at": values["joined_at"],
                },
            )
            .returning(team_members_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_team_member(dict(row))

    async def find_company_user(
        self, company_id: CompanyId, user_id: UserId
    ) -> Optional[CompanyUser]:
        stmt = select(company_users_table).where(
            and_(
                company_users_table.c.company_id == company_id,
                company_users_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_company_user(dict(row)) if row else None

    async def find_companies_for_user(self, user_id: UserId) -> list[CompanyUser]:
        stmt = (
            select(company_users_table)
            .where(company_users_table.c.user_id == user_id)
            .order_by(company_users_table.c.joined_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_company_user(dict(row)) for row in result.mappings().all()]

    async def add_company_user(self, member: CompanyUser) -> CompanyUser:
        values = company_user_to_dict(member)
        stmt = (
            insert(company_users_table)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_company_user",
                set_={"role": values["role"], "joined_at": values["joined_at"]},
            )
            .returning(company_users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_company_user(dict(row))
