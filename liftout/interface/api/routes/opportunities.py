"""Opportunity routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import Field

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.opportunity import (
    CloseOpportunityRequest,
    CloseOpportunityResponse,
    CloseOpportunityUseCase,
    CreateOpportunityRequest,
    CreateOpportunityUseCase,
    GetOpportunityRequest,
    GetOpportunityUseCase,
)
from liftout.application.usecase.view import OpportunityView
from liftout.domain.service import JWTService
from liftout.domain.value import RemoteStatus, Urgency
from liftout.interface.api.auth import require_principal

router = APIRouter(
    prefix="/api/opportunities", tags=["opportunities"], route_class=DishkaRoute
)


class CreateOpportunityAPIRequest(CamelModel):
    """API request for posting an opportunity."""

    company_id: UUID
    title: str
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    remote_policy: RemoteStatus | None = None
    compensation_min: int | None = None
    compensation_max: int | None = None
    compensation_currency: str = "USD"
    team_size_min: int | None = None
    team_size_max: int | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    urgency: Urgency = Urgency.STANDARD
    expires_at: datetime | None = None


class CloseOpportunityAPIRequest(CamelModel):
    """API request for closing an opportunity."""

    status: str = "filled"


@router.post("", response_model=OpportunityView, status_code=status.HTTP_201_CREATED)
async def create_opportunity(
    request: CreateOpportunityAPIRequest,
    create_use_case: FromDishka[CreateOpportunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> OpportunityView:
    """Post an opportunity for one of the caller's companies."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await create_use_case.execute(
        CreateOpportunityRequest(principal=principal, **request.model_dump())
    )


@router.get("/{opportunity_id}", response_model=OpportunityView)
async def get_opportunity(
    opportunity_id: UUID,
    get_use_case: FromDishka[GetOpportunityUseCase],
) -> OpportunityView:
    """Show an opportunity."""
    return await get_use_case.execute(
        GetOpportunityRequest(opportunity_id=opportunity_id)
    )


@router.post("/{opportunity_id}/close", response_model=CloseOpportunityResponse)
async def close_opportunity(
    opportunity_id: UUID,
    close_use_case: FromDishka[CloseOpportunityUseCase],
    jwt_service: FromDishka[JWTService],
    request: CloseOpportunityAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CloseOpportunityResponse:
    """Mark an opportunity as filled or closed.

    Args:
        opportunity_id: Opportunity ID
        close_use_case: Close opportunity use case from DI
        jwt_service: JWT service from DI
        request: Target status (filled when omitted)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Outcome message and resulting status
    """
    principal = require_principal(jwt_service, auth_token, authorization)
    return await close_use_case.execute(
        CloseOpportunityRequest(
            principal=principal,
            opportunity_id=opportunity_id,
            status=request.status if request else "filled",
        )
    )
