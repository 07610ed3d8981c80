"""PostgreSQL implementation of Team repository."""

from collections import defaultdict
from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from liftout.domain.model import Team
from liftout.domain.repository import TeamRepository
from liftout.domain.value import AvailabilityStatus, TeamId, TeamVisibility
from liftout.persistence.mappers import row_to_team, team_to_dict
from liftout.persistence.tables import (
    team_members_table,
    teams_table,
    user_skills_table,
)


class PostgresTeamRepository(TeamRepository):
    """PostgreSQL implementation of TeamRepository.

    Skills and member counts are rolled up from active members in one
    query per batch of teams.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        stmt = select(teams_table).where(
            and_(teams_table.c.id == team_id, teams_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return (await self._hydrate([dict(row)]))[0]

    async def save(self, team: Team) -> Team:
        """Save a team (create or update).

        Args:
            team: Team to save

        Returns:
            Saved team with derived fields reloaded
        """
        team_dict = team_to_dict(team)

        exists = await self.session.execute(
            select(teams_table.c.id).where(teams_table.c.id == team.id)
        )
        if exists.first() is not None:
            stmt = (
                update(teams_table)
                .where(teams_table.c.id == team.id)
                .values(**team_dict)
            )
        else:
            stmt = insert(teams_table).values(**team_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return (await self._hydrate([team_dict]))[0]

    async def list_discoverable(
        self, include_anonymous: bool = False, limit: int = 100
    ) -> list[Team]:
        """List teams companies may discover.

        Args:
            include_anonymous: Whether anonymous teams are included
            limit: Maximum number of teams

        Returns:
            Teams, newest first
        """
        visibilities = [TeamVisibility.PUBLIC.value]
        if include_anonymous:
            visibilities.append(TeamVisibility.ANONYMOUS.value)

        stmt = (
            select(teams_table)
            .where(
                and_(
                    teams_table.c.deleted_at.is_(None),
                    teams_table.c.visibility.in_(visibilities),
                    teams_table.c.availability_status
                    != AvailabilityStatus.NOT_AVAILABLE.value,
                )
            )
            .order_by(teams_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        return await self._hydrate(rows)

    async def _hydrate(self, rows: list[dict]) -> list[Team]:
        if not rows:
            return []
        team_ids = [row["id"] for row in rows]

        count_stmt = (
            select(team_members_table.c.team_id, func.count().label("members"))
            .where(
                and_(
                    team_members_table.c.team_id.in_(team_ids),
                    team_members_table.c.status == "active",
                )
            )
            .group_by(team_members_table.c.team_id)
        )
        counts = {
            row.team_id: row.members
            for row in (await self.session.execute(count_stmt)).all()
        }

        skills_stmt = (
            select(team_members_table.c.team_id, user_skills_table.c.skill)
            .join(
                user_skills_table,
                user_skills_table.c.user_id == team_members_table.c.user_id,
            )
            .where(
                and_(
                    team_members_table.c.team_id.in_(team_ids),
                    team_members_table.c.status == "active",
                )
            )
            .order_by(user_skills_table.c.skill)
        )
        skills: dict = defaultdict(list)
        seen: dict = defaultdict(set)
        for row in (await self.session.execute(skills_stmt)).all():
            key = row.skill.lower()
            if key not in seen[row.team_id]:
                seen[row.team_id].add(key)
                skills[row.team_id].append(row.skill)

        return [
            row_to_team(row, skills=skills[row["id"]], member_count=counts.get(row["id"], 0))
            for row in rows
        ]
