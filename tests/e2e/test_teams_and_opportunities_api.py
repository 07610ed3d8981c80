"""End-to-end tests for teams, opportunities, skills and health."""

from uuid import uuid4

import pytest

from liftout.domain.value import CompanyRole, TeamVisibility, UserType
from tests.conftest import make_company, make_company_user, make_team, make_user


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api):
        response = await api.client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["data_source"] == "memory"


class TestTeams:
    """Tests for team creation and retrieval."""

    @pytest.mark.asyncio
    async def test_create_team_and_roll_up_skills(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))

        # Act
        created = await api.client.post(
            "/api/teams",
            json={
                "name": "Data Team",
                "industry": "Fintech",
                "remoteStatus": "remote",
                "yearsWorkingTogether": 4,
                "salaryExpectationMin": 120000,
                "salaryExpectationMax": 180000,
            },
            headers=api.auth(alice),
        )
        team_id = created.json()["id"]
        skills = await api.client.put(
            "/api/users/me/skills",
            json={"skills": ["Python", "dbt", "python", "  "]},
            headers=api.auth(alice),
        )
        fetched = await api.client.get(f"/api/teams/{team_id}")

        # Assert
        assert created.status_code == 201
        assert created.json()["memberCount"] == 1
        assert skills.status_code == 200
        assert skills.json() == {"skills": ["Python", "dbt"]}
        team = fetched.json()
        assert team["name"] == "Data Team"
        assert sorted(team["skills"]) == ["Python", "dbt"]
        assert team["size"] == 1

    @pytest.mark.asyncio
    async def test_inverted_salary_range_is_rejected(self, api):
        alice = await api.add_user(make_user())

        response = await api.client.post(
            "/api/teams",
            json={
                "name": "Data Team",
                "salaryExpectationMin": 200000,
                "salaryExpectationMax": 100000,
            },
            headers=api.auth(alice),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_private_team_is_hidden_from_outsiders(self, api):
        member = await api.add_user(make_user("member@example.com"))
        team = await api.add_team(make_team(visibility=TeamVisibility.PRIVATE))
        await api.add_member(team, member)

        outsider = await api.client.get(f"/api/teams/{team.id}")
        insider = await api.client.get(f"/api/teams/{team.id}", headers=api.auth(member))

        assert outsider.status_code == 404
        assert insider.status_code == 200

    @pytest.mark.asyncio
    async def test_anonymous_team_is_masked_for_outsiders_only(self, api):
        member = await api.add_user(make_user("member@example.com"))
        team = await api.add_team(
            make_team("Quiet Quants", visibility=TeamVisibility.ANONYMOUS)
        )
        await api.add_member(team, member)

        outsider = (await api.client.get(f"/api/teams/{team.id}")).json()
        insider = (
            await api.client.get(f"/api/teams/{team.id}", headers=api.auth(member))
        ).json()

        assert outsider["isAnonymous"] is True
        assert outsider["name"].startswith("Anonymous Team #")
        assert insider["name"] == "Quiet Quants"

    @pytest.mark.asyncio
    async def test_skills_update_requires_sign_in(self, api):
        response = await api.client.put("/api/users/me/skills", json={"skills": []})

        assert response.status_code == 401


class TestOpportunities:
    """Tests for posting and closing opportunities."""

    async def _company(self, api, role=CompanyRole.RECRUITER):
        recruiter = await api.add_user(
            make_user("rita@acme.com", user_type=UserType.COMPANY)
        )
        company = make_company()
        await api.add_company(company, make_company_user(company, recruiter, role))
        return company, recruiter

    @pytest.mark.asyncio
    async def test_post_get_and_close(self, api):
        # Arrange
        company, recruiter = await self._company(api)

        # Act
        created = await api.client.post(
            "/api/opportunities",
            json={
                "companyId": str(company.id),
                "title": "ML Platform Team",
                "requiredSkills": ["Python", "ML"],
                "urgency": "high",
            },
            headers=api.auth(recruiter),
        )
        opportunity_id = created.json()["id"]
        fetched = await api.client.get(f"/api/opportunities/{opportunity_id}")
        closed = await api.client.post(
            f"/api/opportunities/{opportunity_id}/close",
            json={"status": "closed"},
            headers=api.auth(recruiter),
        )
        again = await api.client.post(
            f"/api/opportunities/{opportunity_id}/close",
            headers=api.auth(recruiter),
        )

        # Assert
        assert created.status_code == 201
        assert created.json()["status"] == "open"
        assert created.json()["company"]["name"] == company.name
        assert fetched.json()["requiredSkills"] == ["Python", "ML"]
        assert closed.json() == {
            "success": True,
            "message": '"ML Platform Team" has been closed',
            "status": "closed",
        }
        assert again.json()["message"] == "Opportunity is already closed"
        assert again.json()["status"] == "closed"

    @pytest.mark.asyncio
    async def test_outsiders_cannot_post_or_close(self, api):
        company, recruiter = await self._company(api)
        outsider = await api.add_user(make_user("eve@example.com"))
        created = await api.client.post(
            "/api/opportunities",
            json={"companyId": str(company.id), "title": "Role"},
            headers=api.auth(recruiter),
        )

        posted = await api.client.post(
            "/api/opportunities",
            json={"companyId": str(company.id), "title": "Role"},
            headers=api.auth(outsider),
        )
        closed = await api.client.post(
            f"/api/opportunities/{created.json()['id']}/close",
            json={"status": "filled"},
            headers=api.auth(outsider),
        )

        assert posted.status_code == 403
        assert closed.status_code == 403
        assert closed.json() == {"error": "Not authorized to manage this opportunity"}

    @pytest.mark.asyncio
    async def test_invalid_close_status(self, api):
        _, recruiter = await self._company(api)

        response = await api.client.post(
            f"/api/opportunities/{uuid4()}/close",
            json={"status": "open"},
            headers=api.auth(recruiter),
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Status must be filled or closed"}

    @pytest.mark.asyncio
    async def test_unknown_opportunity(self, api):
        response = await api.client.get(f"/api/opportunities/{uuid4()}")

        assert response.status_code == 404
