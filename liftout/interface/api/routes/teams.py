"""Team routes."""

from decimal import Decimal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.invitation import (
    CreateTeamInvitationRequest,
    CreateTeamInvitationResponse,
    CreateTeamInvitationUseCase,
)
from liftout.application.usecase.team import (
    CreateTeamRequest,
    CreateTeamUseCase,
    GetTeamRequest,
    GetTeamUseCase,
)
from liftout.application.usecase.view import TeamView
from liftout.domain.service import JWTService
from liftout.domain.value import AvailabilityStatus, RemoteStatus, TeamVisibility
from liftout.interface.api.auth import optional_principal, require_principal

router = APIRouter(prefix="/api/teams", tags=["teams"], route_class=DishkaRoute)


class CreateTeamAPIRequest(CamelModel):
    """API request for creating a team."""

    name: str
    description: str | None = None
    industry: str | None = None
    specialization: str | None = None
    location: str | None = None
    remote_status: RemoteStatus = RemoteStatus.HYBRID
    size: int | None = None
    years_working_together: Decimal | None = None
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    visibility: TeamVisibility = TeamVisibility.PUBLIC
    salary_expectation_min: int | None = None
    salary_expectation_max: int | None = None


class CreateTeamInvitationAPIRequest(CamelModel):
    """API request for inviting a user to a team."""

    email: str
    role: str = "member"
    message: str | None = None


@router.post("", response_model=TeamView, status_code=status.HTTP_201_CREATED)
async def create_team(
    request: CreateTeamAPIRequest,
    create_team_use_case: FromDishka[CreateTeamUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> TeamView:
    """Create a team with the caller as its admin."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await create_team_use_case.execute(
        CreateTeamRequest(principal=principal, **request.model_dump())
    )


@router.get("/{team_id}", response_model=TeamView)
async def get_team(
    team_id: UUID,
    get_team_use_case: FromDishka[GetTeamUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> TeamView:
    """Show a team. Anonymous teams are masked for non-members."""
    return await get_team_use_case.execute(
        GetTeamRequest(
            team_id=team_id,
            principal=optional_principal(jwt_service, auth_token, authorization),
        )
    )


@router.post(
    "/{team_id}/invitations",
    response_model=CreateTeamInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_team_invitation(
    team_id: UUID,
    request: CreateTeamInvitationAPIRequest,
    create_use_case: FromDishka[CreateTeamInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateTeamInvitationResponse:
    """Invite a registered user to the team. Team admins only."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await create_use_case.execute(
        CreateTeamInvitationRequest(
            principal=principal,
            team_id=team_id,
            email=request.email,
            role=request.role,
            message=request.message,
        )
    )
