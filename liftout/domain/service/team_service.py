"""Team domain service."""

from uuid import uuid4

import logfire

from liftout.domain.model import Team, TeamMember
from liftout.domain.repository import MembershipRepository, TeamRepository
from liftout.domain.value import TeamId, TeamMemberId, UserId

from .base import Service


class TeamService(Service):
    """Domain service for team operations."""

    def __init__(
        self,
        team_repository: TeamRepository,
        membership_repository: MembershipRepository,
    ) -> None:
        """Initialize team service.

        Args:
            team_repository: Team repository
            membership_repository: Membership repository
        """
        self.team_repository = team_repository
        self.membership_repository = membership_repository

    async def create_team(self, team: Team, creator_id: UserId) -> Team:
        """Create a team with its creator as the first admin member.

        Args:
            team: Team to create
            creator_id: User creating the team

        Returns:
            The created team, with derived fields loaded
        """
        with logfire.span(
            "team_service.create_team", team_id=str(team.id), creator_id=str(creator_id)
        ):
            await self.team_repository.save(team)
            await self.membership_repository.add_team_member(
                TeamMember(
                    id=TeamMemberId(uuid4()),
                    team_id=team.id,
                    user_id=creator_id,
                    role="lead",
                    is_admin=True,
                    joined_at=team.created_at,
                )
            )
            created = await self.team_repository.find_by_id(team.id)
            logfire.info("Team created", team_id=str(team.id), name=team.name)
            return created or team

    async def get_team(self, team_id: TeamId) -> Team | None:
        """Get a team by ID.

        Args:
            team_id: Team ID

        Returns:
            Team if found, None otherwise
        """
        with logfire.span("team_service.get_team", team_id=str(team_id)):
            team = await self.team_repository.find_by_id(team_id)
            if team is None:
                logfire.warn("Team not found", team_id=str(team_id))
            return team

    async def get_member(self, team_id: TeamId, user_id: UserId) -> TeamMember | None:
        """Active membership of a user in a team, if any."""
        return await self.membership_repository.find_team_member(team_id, user_id)

    async def list_discoverable(
        self, include_anonymous: bool, limit: int
    ) -> list[Team]:
        """Teams companies may be matched with."""
        with logfire.span(
            "team_service.list_discoverable", include_anonymous=include_anonymous
        ):
            teams = await self.team_repository.list_discoverable(
                include_anonymous=include_anonymous, limit=limit
            )
            logfire.info("Discoverable teams loaded", count=len(teams))
            return teams
