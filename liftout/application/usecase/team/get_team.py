"""Get team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import Principal
from liftout.application.usecase.view import TeamView
from liftout.domain.error import NotFoundError
from liftout.domain.service import TeamService
from liftout.domain.value import TeamId, TeamVisibility


class GetTeamRequest(BaseModel):
    """Get team request."""

    team_id: UUID
    principal: Principal | None = None


class GetTeamUseCase:
    """Show a team.

    Private teams are visible to their members only; anonymous teams are
    masked for everyone else.
    """

    def __init__(self, team_service: TeamService) -> None:
        self.team_service = team_service

    async def execute(self, request: GetTeamRequest) -> TeamView:
        """Get a team by ID.

        Raises:
            NotFoundError: If the team does not exist or is hidden from the caller
        """
        with logfire.span("get_team.execute", team_id=str(request.team_id)):
            team_id = TeamId(request.team_id)
            team = await self.team_service.get_team(team_id)
            if team is None:
                raise NotFoundError("Team", str(team_id))

            is_member = request.principal is not None and (
                await self.team_service.get_member(team_id, request.principal.user_id)
                is not None
            )
            if team.visibility == TeamVisibility.PRIVATE and not is_member:
                raise NotFoundError("Team", str(team_id))

            return TeamView.from_team(team, mask_anonymous=not is_member)
