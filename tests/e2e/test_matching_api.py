"""End-to-end tests for the matching endpoints."""

from uuid import uuid4

import pytest

from liftout.domain.value import (
    AvailabilityStatus,
    OpportunityStatus,
    TeamVisibility,
    UserType,
    VerificationStatus,
)
from tests.conftest import (
    make_company,
    make_company_user,
    make_opportunity,
    make_team,
    make_user,
)


async def _company_with_recruiter(api, verified: bool = True):
    recruiter = await api.add_user(
        make_user("rita@acme.com", user_type=UserType.COMPANY)
    )
    company = make_company(
        verification_status=(
            VerificationStatus.VERIFIED if verified else VerificationStatus.UNVERIFIED
        )
    )
    await api.add_company(company, make_company_user(company, recruiter))
    return company, recruiter


async def _team_with_skills(api, name: str, skills: list[str], **overrides):
    team = await api.add_team(make_team(name, **overrides))
    member = await api.add_user(make_user(f"{uuid4().hex[:8]}@example.com"), skills)
    await api.add_member(team, member)
    return team


class TestMatchTeams:
    """Tests for GET /api/matching/teams."""

    @pytest.mark.asyncio
    async def test_scores_candidate_teams(self, api):
        # Arrange
        company, recruiter = await _company_with_recruiter(api)
        opportunity = await api.add_opportunity(
            make_opportunity(
                company.id, required_skills=["Python", "ML"], industry="Healthcare"
            )
        )
        team = await _team_with_skills(
            api, "Fin Team", ["python", "react"], industry="Finance"
        )

        # Act
        response = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": 0},
            headers=api.auth(recruiter),
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["opportunity"] == {
            "id": str(opportunity.id),
            "title": opportunity.title,
            "company": company.name,
            "industry": "Healthcare",
        }
        match = data["matches"][0]
        assert match["team"]["id"] == str(team.id)
        assert match["team"]["skills"] == ["python", "react"]
        assert match["score"]["breakdown"]["skills"] == 50
        assert match["score"]["breakdown"]["industry"] == 40
        assert 0 <= match["score"]["total"] <= 100

    @pytest.mark.asyncio
    async def test_results_are_sorted_filtered_and_limited(self, api):
        # Arrange
        company, recruiter = await _company_with_recruiter(api)
        opportunity = await api.add_opportunity(
            make_opportunity(company.id, required_skills=["Python", "PostgreSQL"])
        )
        await _team_with_skills(api, "Strong", ["python", "postgresql"])
        await _team_with_skills(api, "Partial", ["python"])
        await _team_with_skills(
            api,
            "Weak",
            [],
            industry="Retail",
            availability_status=AvailabilityStatus.ENGAGED,
        )
        await _team_with_skills(
            api,
            "Unavailable",
            ["python", "postgresql"],
            availability_status=AvailabilityStatus.NOT_AVAILABLE,
        )

        # Act
        everything = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": 0},
            headers=api.auth(recruiter),
        )
        top = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": 0, "limit": 1},
            headers=api.auth(recruiter),
        )

        # Assert
        names = [m["team"]["name"] for m in everything.json()["matches"]]
        assert "Unavailable" not in names
        assert names[:2] == ["Strong", "Partial"]
        totals = [m["score"]["total"] for m in everything.json()["matches"]]
        assert totals == sorted(totals, reverse=True)
        assert top.json()["total"] == 1
        assert top.json()["matches"][0]["team"]["name"] == "Strong"

        threshold = totals[1]
        filtered = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": threshold},
            headers=api.auth(recruiter),
        )
        assert all(
            m["score"]["total"] >= threshold for m in filtered.json()["matches"]
        )

    @pytest.mark.asyncio
    async def test_anonymous_teams_are_masked_for_verified_companies(self, api):
        # Arrange
        company, recruiter = await _company_with_recruiter(api)
        opportunity = await api.add_opportunity(make_opportunity(company.id))
        team = await _team_with_skills(
            api, "Secret Squad", ["python"], visibility=TeamVisibility.ANONYMOUS
        )

        # Act
        response = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": 0},
            headers=api.auth(recruiter),
        )

        # Assert
        view = response.json()["matches"][0]["team"]
        assert view["isAnonymous"] is True
        assert view["name"] == f"Anonymous Team #{str(team.id)[-6:].upper()}"
        assert view["location"] == "Location withheld"
        assert "Secret Squad" not in response.text

    @pytest.mark.asyncio
    async def test_anonymous_teams_hidden_from_unverified_companies(self, api):
        company, recruiter = await _company_with_recruiter(api, verified=False)
        opportunity = await api.add_opportunity(make_opportunity(company.id))
        await _team_with_skills(
            api, "Secret Squad", ["python"], visibility=TeamVisibility.ANONYMOUS
        )

        response = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(opportunity.id), "minScore": 0},
            headers=api.auth(recruiter),
        )

        assert response.json()["matches"] == []

    @pytest.mark.asyncio
    async def test_requires_sign_in(self, api):
        response = await api.client.get(
            "/api/matching/teams", params={"opportunityId": str(uuid4())}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Authentication required"

    @pytest.mark.asyncio
    async def test_unknown_opportunity(self, api):
        user = await api.add_user(make_user())

        response = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(uuid4())},
            headers=api.auth(user),
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Opportunity not found"}

    @pytest.mark.asyncio
    async def test_out_of_range_min_score_is_rejected(self, api):
        user = await api.add_user(make_user())

        response = await api.client.get(
            "/api/matching/teams",
            params={"opportunityId": str(uuid4()), "minScore": 101},
            headers=api.auth(user),
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")


class TestMatchOpportunities:
    """Tests for GET /api/matching/opportunities."""

    @pytest.mark.asyncio
    async def test_scores_open_opportunities(self, api):
        # Arrange
        company, _ = await _company_with_recruiter(api)
        team = await _team_with_skills(api, "Platform Team", ["python", "postgresql"])
        member = await api.add_user(make_user("lead@example.com"))
        await api.add_member(team, member, is_admin=True)
        open_role = await api.add_opportunity(make_opportunity(company.id, "Open role"))
        await api.add_opportunity(
            make_opportunity(company.id, "Filled role", status=OpportunityStatus.FILLED)
        )

        # Act
        response = await api.client.get(
            "/api/matching/opportunities",
            params={"teamId": str(team.id), "minScore": 0},
            headers=api.auth(member),
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["team"]["id"] == str(team.id)
        assert data["team"]["skills"] == ["postgresql", "python"]
        assert data["total"] == 1
        match = data["matches"][0]
        assert match["opportunity"]["id"] == str(open_role.id)
        assert match["opportunity"]["company"]["name"] == company.name
        assert match["opportunity"]["company"]["verified"] is True
        assert "companyQuality" not in match["score"]["breakdown"]
        assert "company_quality" in match["score"]["breakdown"]

    @pytest.mark.asyncio
    async def test_unknown_team(self, api):
        user = await api.add_user(make_user())

        response = await api.client.get(
            "/api/matching/opportunities",
            params={"teamId": str(uuid4())},
            headers=api.auth(user),
        )

        assert response.status_code == 404
