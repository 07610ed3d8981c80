"""Create team use case."""

from decimal import Decimal
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from liftout.application.usecase.base import Principal
from liftout.application.usecase.view import TeamView
from liftout.domain.error import ValidationError
from liftout.domain.model import Team
from liftout.domain.service import TeamService
from liftout.domain.value import (
    AvailabilityStatus,
    RemoteStatus,
    TeamId,
    TeamVisibility,
)


class CreateTeamRequest(BaseModel):
    """Create team request."""

    principal: Principal
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    industry: str | None = None
    specialization: str | None = None
    location: str | None = None
    remote_status: RemoteStatus = RemoteStatus.HYBRID
    size: int | None = Field(default=None, ge=1)
    years_working_together: Decimal | None = Field(default=None, ge=0)
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    visibility: TeamVisibility = TeamVisibility.PUBLIC
    salary_expectation_min: int | None = Field(default=None, ge=0)
    salary_expectation_max: int | None = Field(default=None, ge=0)


class CreateTeamUseCase:
    """Create a team led by the caller."""

    def __init__(self, team_service: TeamService) -> None:
        """Initialize create team use case.

        Args:
            team_service: Team domain service
        """
        self.team_service = team_service

    async def execute(self, request: CreateTeamRequest) -> TeamView:
        """Create the team and make the caller its admin.

        Args:
            request: Team attributes

        Returns:
            The created team, unmasked

        Raises:
            ValidationError: If the salary range is inverted
        """
        if (
            request.salary_expectation_min is not None
            and request.salary_expectation_max is not None
            and request.salary_expectation_min > request.salary_expectation_max
        ):
            raise ValidationError("Minimum salary cannot exceed maximum salary")

        with logfire.span(
            "create_team.execute", user_id=str(request.principal.user_id)
        ):
            team = Team(
                id=TeamId(uuid4()),
                created_by=request.principal.user_id,
                **request.model_dump(exclude={"principal"}),
            )
            created = await self.team_service.create_team(
                team, request.principal.user_id
            )
            return TeamView.from_team(created, mask_anonymous=False)
