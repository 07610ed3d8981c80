"""Unit tests for MatchingService."""

import random
from uuid import uuid4

import pytest

from liftout.config import MatchingSettings
from liftout.domain.model import Team
from liftout.domain.service import MatchingService, scoring
from liftout.domain.value import (
    AvailabilityStatus,
    CompanyId,
    Recommendation,
    RemoteStatus,
)
from tests.conftest import make_company, make_opportunity, make_team



@pytest.fixture
def matching_service() -> MatchingService:
    return MatchingService(MatchingSettings())


def _perfect_pair():
    team = make_team(
        skills=["python", "postgresql"],
        remote_status=RemoteStatus.REMOTE,
        years_working_together=6,
        salary_expectation_min=100_000,
        salary_expectation_max=150_000,
    )
    opportunity = make_opportunity(
        CompanyId(uuid4()),
        remote_policy=RemoteStatus.REMOTE,
        compensation_min=100_000,
        compensation_max=150_000,
    )
    return team, opportunity


class TestScoreTeam:
    """Tests for score_team (company view)."""

    def test_skills_and_industry_sub_scores(self, matching_service):
        """Python+ML against python+react covers half; unrelated industries score 40."""
        # Arrange
        team = make_team(skills=["python", "react"], industry="Finance")
        opportunity = make_opportunity(
            CompanyId(uuid4()), required_skills=["Python", "ML"], industry="Healthcare"
        )

        # Act
        score = matching_service.score_team(team, opportunity)

        # Assert
        assert score.breakdown["skills"] == 50
        assert score.breakdown["industry"] == 40
        assert "Industry transition needed" in score.concerns

    def test_perfect_match(self, matching_service):
        team, opportunity = _perfect_pair()

        score = matching_service.score_team(team, opportunity)

        assert score.total == 100
        assert score.recommendation == Recommendation.EXCELLENT
        assert set(score.breakdown) == {
            "skills",
            "industry",
            "compensation",
            "size",
            "location",
            "experience",
            "availability",
        }
        assert len(score.strengths) == 7
        assert score.concerns == []

    def test_total_is_in_range_and_ignores_skill_order(self, matching_service):
        """Shuffling either skills list never changes the total."""
        rng = random.Random(7)
        skills = ["python", "go", "kubernetes", "react", "ml", "sql"]
        required = ["Python", "SQL", "Rust", "Kubernetes"]
        team = make_team(skills=skills)
        opportunity = make_opportunity(CompanyId(uuid4()), required_skills=required)
        baseline = matching_service.score_team(team, opportunity).total

        for _ in range(20):
            shuffled_team = team.model_copy(update={"skills": rng.sample(skills, len(skills))})
            shuffled_opp = opportunity.model_copy(
                update={"required_skills": rng.sample(required, len(required))}
            )
            total = matching_service.score_team(shuffled_team, shuffled_opp).total
            assert total == baseline
            assert 0 <= total <= 100

    def test_worst_case_stays_in_range(self, matching_service):
        team = Team(
            id=make_team().id,
            name="Empty",
            size=40,
            availability_status=AvailabilityStatus.NOT_AVAILABLE,
            remote_status=RemoteStatus.REMOTE,
            location="Paris, France",
            salary_expectation_min=900_000,
        )
        opportunity = make_opportunity(
            CompanyId(uuid4()),
            industry="Healthcare",
            remote_policy=RemoteStatus.ONSITE,
            compensation_min=10_000,
            compensation_max=20_000,
        )

        score = matching_service.score_team(team, opportunity)

        assert 0 <= score.total <= 100
        assert score.recommendation == Recommendation.POOR
        assert score.breakdown["availability"] == 0

    def test_custom_weights_are_applied(self):
        """All weight on skills makes the total equal the skills score."""
        settings = MatchingSettings(
            team_weights={
                "skills": 100,
                "industry": 0,
                "compensation": 0,
                "size": 0,
                "location": 0,
                "experience": 0,
                "availability": 0,
            }
        )
        service = MatchingService(settings)
        team = make_team(skills=["python"])
        opportunity = make_opportunity(
            CompanyId(uuid4()), required_skills=["Python", "Go", "Rust"]
        )

        assert service.score_team(team, opportunity).total == 33


class TestScoreOpportunity:
    """Tests for score_opportunity (team view)."""

    def test_uses_company_quality_and_urgency(self, matching_service):
        team, opportunity = _perfect_pair()
        company = make_company(logo_url="https://cdn.example.com/logo.png")

        score = matching_service.score_opportunity(team, opportunity, company)

        assert set(score.breakdown) == {
            "skills",
            "industry",
            "compensation",
            "size",
            "location",
            "company_quality",
            "urgency",
        }
        assert score.breakdown["company_quality"] == 100
        assert score.breakdown["urgency"] == 70

    def test_unknown_company_is_neutral(self, matching_service):
        team, opportunity = _perfect_pair()

        score = matching_service.score_opportunity(team, opportunity, None)

        assert score.breakdown["company_quality"] == 50

    def test_compensation_matches_company_view(self, matching_service):
        team = make_team(salary_expectation_min=100_000, salary_expectation_max=150_000)
        opportunity = make_opportunity(
            CompanyId(uuid4()), compensation_min=130_000, compensation_max=200_000
        )

        team_view = matching_service.score_opportunity(team, opportunity, None)
        company_view = matching_service.score_team(team, opportunity)

        expected = scoring.compensation_score(100_000, 150_000, 130_000, 200_000)
        assert expected == 82
        assert team_view.breakdown["compensation"] == expected
        assert company_view.breakdown["compensation"] == expected


class TestRecommend:
    """Tier boundaries are inclusive lower bounds."""

    @pytest.mark.parametrize(
        "total, expected",
        [
            (100, Recommendation.EXCELLENT),
            (85, Recommendation.EXCELLENT),
            (84, Recommendation.GOOD),
            (70, Recommendation.GOOD),
            (69, Recommendation.FAIR),
            (55, Recommendation.FAIR),
            (54, Recommendation.POOR),
            (0, Recommendation.POOR),
        ],
    )
    def test_tier_boundaries(self, matching_service, total, expected):
        assert matching_service.recommend(total) == expected
