"""Match teams to an opportunity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.application.usecase.view import ScoreView, TeamView
from liftout.config import MatchingSettings
from liftout.domain.error import NotFoundError
from liftout.domain.service import (
    CompanyService,
    MatchingService,
    OpportunityService,
    TeamService,
)
from liftout.domain.value import OpportunityId, UserType


class MatchTeamsRequest(BaseModel):
    """Match teams request."""

    principal: Principal
    opportunity_id: UUID
    min_score: int
    limit: int


class OpportunitySummary(CamelModel):
    id: UUID
    title: str
    company: str | None = None
    industry: str | None = None


class TeamMatch(CamelModel):
    team: TeamView
    score: ScoreView


class MatchTeamsResponse(CamelModel):
    """Match teams response."""

    matches: list[TeamMatch]
    total: int
    opportunity: OpportunitySummary


class MatchTeamsUseCase:
    """Rank discoverable teams against one opportunity.

    Anonymous teams are only considered for members of a verified company,
    and are returned masked.
    """

    def __init__(
        self,
        team_service: TeamService,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
        matching_service: MatchingService,
        settings: MatchingSettings,
    ) -> None:
        """Initialize match teams use case.

        Args:
            team_service: Team domain service
            opportunity_service: Opportunity domain service
            company_service: Company domain service
            matching_service: Scoring service
            settings: Matching settings
        """
        self.team_service = team_service
        self.opportunity_service = opportunity_service
        self.company_service = company_service
        self.matching_service = matching_service
        self.settings = settings

    async def execute(self, request: MatchTeamsRequest) -> MatchTeamsResponse:
        """Score teams and return the best ones.

        Args:
            request: Opportunity and result filters

        Returns:
            Matches sorted by total score, best first

        Raises:
            NotFoundError: If the opportunity does not exist
        """
        with logfire.span(
            "match_teams.execute",
            opportunity_id=str(request.opportunity_id),
            user_id=str(request.principal.user_id),
        ):
            opportunity = await self.opportunity_service.get_opportunity(
                OpportunityId(request.opportunity_id)
            )
            if opportunity is None:
                raise NotFoundError("Opportunity", str(request.opportunity_id))

            include_anonymous = (
                request.principal.user_type == UserType.COMPANY
                and await self.company_service.is_verified_company_user(
                    request.principal.user_id
                )
            )
            teams = await self.team_service.list_discoverable(
                include_anonymous=include_anonymous,
                limit=self.settings.candidate_limit,
            )

            scored = [
                (team, self.matching_service.score_team(team, opportunity))
                for team in teams
            ]
            scored = [pair for pair in scored if pair[1].total >= request.min_score]
            scored.sort(key=lambda pair: pair[1].total, reverse=True)
            scored = scored[: request.limit]

            company = await self.company_service.get_company(opportunity.company_id)

            logfire.info(
                "Teams matched",
                candidates=len(teams),
                returned=len(scored),
                include_anonymous=include_anonymous,
            )
            return MatchTeamsResponse(
                matches=[
                    TeamMatch(
                        team=TeamView.from_team(team),
                        score=ScoreView.from_score(score),
                    )
                    for team, score in scored
                ],
                total=len(scored),
                opportunity=OpportunitySummary(
                    id=opportunity.id,
                    title=opportunity.title,
                    company=company.name if company else None,
                    industry=opportunity.industry,
                ),
            )
