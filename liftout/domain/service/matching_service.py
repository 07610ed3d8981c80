"""Match scoring domain service."""

import logfire

from liftout.config import MatchingSettings
from liftout.domain.model import Company, MatchScore, Opportunity, Team
from liftout.domain.value import Recommendation

from . import scoring
from .base import Service

STRENGTHS = {
    "skills": "Exceptional skills alignment",
    "industry": "Direct industry experience",
    "compensation": "Compensation meets expectations",
    "size": "Team size fits the role",
    "location": "Location and remote policy align",
    "experience": "Highly cohesive team",
    "availability": "Team is available now",
    "company_quality": "Established, verified company",
    "urgency": "Company is hiring urgently",
}

CONCERNS = {
    "skills": "Skills gap may require training",
    "industry": "Industry transition needed",
    "compensation": "Compensation expectations may not align",
    "size": "Team size doesn't match requirements",
    "location": "Location/remote work mismatch",
    "experience": "Limited shared working history",
    "availability": "Team has limited availability",
    "company_quality": "Company profile is incomplete or unverified",
    "urgency": "Low hiring urgency",
}


class MatchingService(Service):
    """Domain service that scores teams against opportunities.

    Scoring is deterministic and does no I/O. Weights, tier thresholds and
    insight thresholds all come from ``MatchingSettings``.
    """

    def __init__(self, settings: MatchingSettings) -> None:
        """Initialize matching service.

        Args:
            settings: Matching configuration
        """
        self.settings = settings

    def score_team(self, team: Team, opportunity: Opportunity) -> MatchScore:
        """Score a candidate team for an opportunity (company view).

        Args:
            team: Candidate team, with skills rolled up from its members
            opportunity: The opportunity being filled

        Returns:
            Weighted match score with insights
        """
        breakdown = self._shared_breakdown(team, opportunity)
        breakdown["experience"] = scoring.experience_score(team.years_working_together)
        breakdown["availability"] = scoring.availability_score(team.availability_status)
        return self._aggregate(breakdown, self.settings.team_weights)

    def score_opportunity(
        self, team: Team, opportunity: Opportunity, company: Company | None
    ) -> MatchScore:
        """Score an opportunity for a team (team view).

        Args:
            team: The team looking for a move
            opportunity: Candidate opportunity
            company: Company that posted the opportunity, if known

        Returns:
            Weighted match score with insights
        """
        breakdown = self._shared_breakdown(team, opportunity)
        breakdown["company_quality"] = scoring.company_quality_score(company)
        breakdown["urgency"] = scoring.urgency_score(opportunity.urgency)
        return self._aggregate(breakdown, self.settings.opportunity_weights)

    def recommend(self, total: int) -> Recommendation:
        """Map a total score to its recommendation tier.

        Lower bounds are inclusive: with default thresholds 85 is excellent
        and 84 is good.
        """
        thresholds = self.settings.thresholds
        if total >= thresholds.excellent:
            return Recommendation.EXCELLENT
        if total >= thresholds.good:
            return Recommendation.GOOD
        if total >= thresholds.fair:
            return Recommendation.FAIR
        return Recommendation.POOR

    def _shared_breakdown(self, team: Team, opportunity: Opportunity) -> dict[str, int]:
        # Compensation is scored the same way in both views.
        return {
            "skills": scoring.skills_score(
                team.skills,
                opportunity.required_skills,
                neutral=self.settings.neutral_skills_score,
            ),
            "industry": scoring.industry_score(team.industry, opportunity.industry),
            "compensation": scoring.compensation_score(
                team.salary_expectation_min,
                team.salary_expectation_max,
                opportunity.compensation_min,
                opportunity.compensation_max,
            ),
            "size": scoring.size_score(
                team.effective_size,
                opportunity.team_size_min,
                opportunity.team_size_max,
            ),
            "location": scoring.location_score(
                team.location,
                team.remote_status,
                opportunity.location,
                opportunity.remote_policy,
            ),
        }

    def _aggregate(
        self, breakdown: dict[str, int], weights: dict[str, int]
    ) -> MatchScore:
        # Integer arithmetic keeps half-up rounding exact
        weighted = sum(score * weights.get(factor, 0) for factor, score in breakdown.items())
        total = scoring.clamp((weighted + 50) // 100)

        strengths = [
            STRENGTHS[factor]
            for factor, score in breakdown.items()
            if score >= self.settings.strength_threshold
        ]
        concerns = [
            CONCERNS[factor]
            for factor, score in breakdown.items()
            if score < self.settings.concern_threshold
        ]

        score = MatchScore(
            total=total,
            breakdown=breakdown,
            recommendation=self.recommend(total),
            strengths=strengths,
            concerns=concerns,
        )
        logfire.debug(
            "Match scored",
            total=score.total,
            recommendation=score.recommendation.value,
        )
        return score
