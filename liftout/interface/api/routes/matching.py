"""Matching routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from liftout.application.usecase.matching import (
    MatchOpportunitiesRequest,
    MatchOpportunitiesResponse,
    MatchOpportunitiesUseCase,
    MatchTeamsRequest,
    MatchTeamsResponse,
    MatchTeamsUseCase,
)
from liftout.config import MatchingSettings
from liftout.domain.service import JWTService
from liftout.interface.api.auth import require_principal

router = APIRouter(prefix="/api/matching", tags=["matching"], route_class=DishkaRoute)


@router.get("/teams", response_model=MatchTeamsResponse)
async def match_teams(
    match_teams_use_case: FromDishka[MatchTeamsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[MatchingSettings],
    opportunity_id: UUID = Query(alias="opportunityId"),
    min_score: int | None = Query(default=None, alias="minScore", ge=0, le=100),
    limit: int | None = Query(default=None, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MatchTeamsResponse:
    """Rank teams for an opportunity.

    Args:
        match_teams_use_case: Match teams use case from DI
        jwt_service: JWT service from DI
        settings: Matching settings, for default filters
        opportunity_id: Opportunity to match against
        min_score: Lowest total score to return
        limit: Maximum number of matches
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Matches, best first
    """
    principal = require_principal(jwt_service, auth_token, authorization)
    return await match_teams_use_case.execute(
        MatchTeamsRequest(
            principal=principal,
            opportunity_id=opportunity_id,
            min_score=settings.default_min_score if min_score is None else min_score,
            limit=limit or settings.default_limit,
        )
    )


@router.get("/opportunities", response_model=MatchOpportunitiesResponse)
async def match_opportunities(
    match_opportunities_use_case: FromDishka[MatchOpportunitiesUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[MatchingSettings],
    team_id: UUID = Query(alias="teamId"),
    min_score: int | None = Query(default=None, alias="minScore", ge=0, le=100),
    limit: int | None = Query(default=None, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MatchOpportunitiesResponse:
    """Rank open opportunities for a team."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await match_opportunities_use_case.execute(
        MatchOpportunitiesRequest(
            principal=principal,
            team_id=team_id,
            min_score=settings.default_min_score if min_score is None else min_score,
            limit=limit or settings.default_limit,
        )
    )
