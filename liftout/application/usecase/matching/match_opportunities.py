"""Match opportunities to a team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.application.usecase.view import OpportunityView, ScoreView
from liftout.config import MatchingSettings
from liftout.domain.error import NotFoundError
from liftout.domain.model.common import utcnow
from liftout.domain.service import (
    CompanyService,
    MatchingService,
    OpportunityService,
    TeamService,
)
from liftout.domain.value import TeamId


class MatchOpportunitiesRequest(BaseModel):
    """Match opportunities request."""

    principal: Principal
    team_id: UUID
    min_score: int
    limit: int


class TeamSummary(CamelModel):
    id: UUID
    name: str
    industry: str | None = None
    skills: list[str]


class OpportunityMatch(CamelModel):
    opportunity: OpportunityView
    score: ScoreView


class MatchOpportunitiesResponse(CamelModel):
    """Match opportunities response."""

    matches: list[OpportunityMatch]
    total: int
    team: TeamSummary


class MatchOpportunitiesUseCase:
    """Rank open opportunities for one team."""

    def __init__(
        self,
        team_service: TeamService,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
        matching_service: MatchingService,
        settings: MatchingSettings,
    ) -> None:
        self.team_service = team_service
        self.opportunity_service = opportunity_service
        self.company_service = company_service
        self.matching_service = matching_service
        self.settings = settings

    async def execute(
        self, request: MatchOpportunitiesRequest
    ) -> MatchOpportunitiesResponse:
        """Score open opportunities and return the best ones.

        Args:
            request: Team and result filters

        Returns:
            Matches sorted by total score, best first

        Raises:
            NotFoundError: If the team does not exist
        """
        with logfire.span(
            "match_opportunities.execute",
            team_id=str(request.team_id),
            user_id=str(request.principal.user_id),
        ):
            team = await self.team_service.get_team(TeamId(request.team_id))
            if team is None:
                raise NotFoundError("Team", str(request.team_id))

            opportunities = await self.opportunity_service.list_open(
                utcnow(), self.settings.candidate_limit
            )
            companies = await self.company_service.get_companies(
                [opp.company_id for opp in opportunities]
            )

            scored = [
                (
                    opp,
                    self.matching_service.score_opportunity(
                        team, opp, companies.get(opp.company_id)
                    ),
                )
                for opp in opportunities
            ]
            scored = [pair for pair in scored if pair[1].total >= request.min_score]
            scored.sort(key=lambda pair: pair[1].total, reverse=True)
            scored = scored[: request.limit]

            logfire.info(
                "Opportunities matched",
                candidates=len(opportunities),
                returned=len(scored),
            )
            return MatchOpportunitiesResponse(
                matches=[
                    OpportunityMatch(
                        opportunity=OpportunityView.from_opportunity(
                            opp, companies.get(opp.company_id)
                        ),
                        score=ScoreView.from_score(score),
                    )
                    for opp, score in scored
                ],
                total=len(scored),
                team=TeamSummary(
                    id=team.id,
                    name=team.name,
                    industry=team.industry,
                    skills=team.skills,
                ),
            )
