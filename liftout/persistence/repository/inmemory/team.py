"""In-memory team repository for testing."""

from typing import Optional

from liftout.domain.model import Team
from liftout.domain.repository import TeamRepository
from liftout.domain.value import AvailabilityStatus, TeamId, TeamVisibility

from .store import InMemoryStore


class InMemoryTeamRepository(TeamRepository):
    """In-memory implementation of TeamRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        team = self._store.teams.get(team_id)
        if team is None or team.deleted_at is not None:
            return None
        return self._hydrate(team)

    async def save(self, team: Team) -> Team:
        self._store.teams[team.id] = team.model_copy(
            update={"skills": [], "member_count": 0}
        )
        return self._hydrate(team)

    async def list_discoverable(
        self, include_anonymous: bool = False, limit: int = 100
    ) -> list[Team]:
        visibilities = {TeamVisibility.PUBLIC}
        if include_anonymous:
            visibilities.add(TeamVisibility.ANONYMOUS)

        teams = [
            team
            for team in self._store.teams.values()
            if team.deleted_at is None
            and team.visibility in visibilities
            and team.availability_status != AvailabilityStatus.NOT_AVAILABLE
        ]
        teams.sort(key=lambda t: t.created_at, reverse=True)
        return [self._hydrate(team) for team in teams[:limit]]

    def _hydrate(self, team: Team) -> Team:
        members = [m for m in self._store.team_members if m.team_id == team.id]
        skills: dict[str, str] = {}
        for member in members:
            for skill in self._store.user_skills.get(member.user_id, []):
                skills.setdefault(skill.lower(), skill)
        return team.model_copy(
            update={
                "skills": sorted(skills.values()),
                "member_count": len(members),
            }
        )
