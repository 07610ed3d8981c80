"""End-to-end tests for company and team invitations."""

from uuid import uuid4

import pytest

from liftout.domain.value import CompanyRole, UserType
from tests.conftest import make_company, make_company_user, make_team, make_user


async def _company_admin(api, role: CompanyRole = CompanyRole.OWNER):
    admin = await api.add_user(make_user("owner@acme.com", user_type=UserType.COMPANY))
    company = make_company()
    await api.add_company(company, make_company_user(company, admin, role))
    return company, admin


class TestCreateCompanyInvitation:
    """Tests for POST /api/companies/invitations."""

    @pytest.mark.asyncio
    async def test_owner_invites_by_email(self, api):
        # Arrange
        company, owner = await _company_admin(api)

        # Act
        response = await api.client.post(
            "/api/companies/invitations",
            json={
                "companyId": str(company.id),
                "inviteeEmail": "New.Hire@Example.com",
                "role": "recruiter",
                "message": "Welcome aboard",
            },
            headers=api.auth(owner),
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["emailSent"] is True
        assert data["message"] == "Invitation sent successfully"
        assert data["inviteLink"].startswith("http://localhost:3000/invites/")

        emails = await api.emails()
        assert emails.sent[-1]["to"] == "new.hire@example.com"
        assert company.name in emails.sent[-1]["subject"]

        token = data["inviteLink"].rsplit("/", 1)[1]
        details = await api.client.get(f"/api/invites/{token}")
        assert details.json()["invitation"]["targetName"] == company.name
        assert details.json()["invitation"]["role"] == "recruiter"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, status, error",
        [
            (
                {"inviteeEmail": "not-an-email", "role": "member"},
                400,
                "Invalid email address",
            ),
            (
                {"inviteeEmail": "x@example.com", "role": "owner"},
                400,
                "Invalid role. Must be member, admin, or recruiter",
            ),
        ],
    )
    async def test_input_validation(self, api, payload, status, error):
        company, owner = await _company_admin(api)

        response = await api.client.post(
            "/api/companies/invitations",
            json={"companyId": str(company.id), **payload},
            headers=api.auth(owner),
        )

        assert response.status_code == status
        assert response.json() == {"error": error}

    @pytest.mark.asyncio
    async def test_plain_members_cannot_invite(self, api):
        company, _ = await _company_admin(api)
        member = await api.add_user(make_user("member@acme.com"))
        await api.add_company(company, make_company_user(company, member, CompanyRole.MEMBER))

        response = await api.client.post(
            "/api/companies/invitations",
            json={
                "companyId": str(company.id),
                "inviteeEmail": "x@example.com",
                "role": "member",
            },
            headers=api.auth(member),
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Only company admins can send invitations"}

    @pytest.mark.asyncio
    async def test_existing_member_and_duplicate_pending(self, api):
        # Arrange
        company, owner = await _company_admin(api, CompanyRole.ADMIN)
        body = {
            "companyId": str(company.id),
            "inviteeEmail": "carol@example.com",
            "role": "member",
        }

        # Act
        first = await api.client.post(
            "/api/companies/invitations", json=body, headers=api.auth(owner)
        )
        second = await api.client.post(
            "/api/companies/invitations", json=body, headers=api.auth(owner)
        )
        self_invite = await api.client.post(
            "/api/companies/invitations",
            json={**body, "inviteeEmail": "owner@acme.com"},
            headers=api.auth(owner),
        )

        # Assert
        assert first.status_code == 201
        assert second.status_code == 409
        assert self_invite.status_code == 400
        assert self_invite.json() == {
            "error": "This user is already a member of the company"
        }

    @pytest.mark.asyncio
    async def test_email_failure_still_creates_invitation(self, api):
        company, owner = await _company_admin(api)
        emails = await api.emails()
        emails.fail_for.add("bounce@example.com")

        response = await api.client.post(
            "/api/companies/invitations",
            json={
                "companyId": str(company.id),
                "inviteeEmail": "bounce@example.com",
                "role": "member",
            },
            headers=api.auth(owner),
        )

        assert response.status_code == 201
        assert response.json()["emailSent"] is False
        assert (
            response.json()["message"]
            == "Invitation created, but the email could not be sent"
        )


class TestListCompanyInvitations:
    """Tests for GET /api/companies/invitations."""

    @pytest.mark.asyncio
    async def test_admin_lists_company_invitations(self, api):
        company, owner = await _company_admin(api)
        for email in ("a@example.com", "b@example.com"):
            await api.client.post(
                "/api/companies/invitations",
                json={"companyId": str(company.id), "inviteeEmail": email, "role": "member"},
                headers=api.auth(owner),
            )

        response = await api.client.get(
            "/api/companies/invitations",
            params={"companyId": str(company.id)},
            headers=api.auth(owner),
        )

        assert response.status_code == 200
        items = response.json()["invitations"]
        assert {i["inviteeEmail"] for i in items} == {"a@example.com", "b@example.com"}
        assert all(i["companyName"] == company.name for i in items)
        assert all(i["status"] == "pending" for i in items)

    @pytest.mark.asyncio
    async def test_outsider_cannot_list(self, api):
        company, _ = await _company_admin(api)
        outsider = await api.add_user(make_user("eve@example.com"))

        response = await api.client.get(
            "/api/companies/invitations",
            params={"companyId": str(company.id)},
            headers=api.auth(outsider),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_invitee_lists_own_invitations(self, api):
        company, owner = await _company_admin(api)
        invitee = await api.add_user(make_user("dan@example.com"))
        await api.client.post(
            "/api/companies/invitations",
            json={
                "companyId": str(company.id),
                "inviteeEmail": "dan@example.com",
                "role": "member",
            },
            headers=api.auth(owner),
        )

        response = await api.client.get(
            "/api/companies/invitations", headers=api.auth(invitee)
        )

        items = response.json()["invitations"]
        assert len(items) == 1
        assert items[0]["companyId"] == str(company.id)


class TestCreateTeamInvitation:
    """Tests for POST /api/teams/{id}/invitations."""

    @pytest.mark.asyncio
    async def test_team_admin_invites_registered_user(self, api):
        # Arrange
        lead = await api.add_user(make_user("lead@example.com"))
        await api.add_user(make_user("bob@example.com", first_name="Bob"))
        team = await api.add_team(make_team("Platform Team"))
        await api.add_member(team, lead, is_admin=True)

        # Act
        response = await api.client.post(
            f"/api/teams/{team.id}/invitations",
            json={"email": "bob@example.com", "role": "member"},
            headers=api.auth(lead),
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["emailSent"] is True
        emails = await api.emails()
        assert emails.sent[-1]["to"] == "bob@example.com"
        assert "Platform Team" in emails.sent[-1]["subject"]

    @pytest.mark.asyncio
    async def test_non_admin_cannot_invite(self, api):
        member = await api.add_user(make_user("member@example.com"))
        await api.add_user(make_user("bob@example.com"))
        team = await api.add_team(make_team())
        await api.add_member(team, member)

        response = await api.client.post(
            f"/api/teams/{team.id}/invitations",
            json={"email": "bob@example.com"},
            headers=api.auth(member),
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Only team admins can send invitations"}

    @pytest.mark.asyncio
    async def test_unregistered_invitee(self, api):
        lead = await api.add_user(make_user("lead@example.com"))
        team = await api.add_team(make_team())
        await api.add_member(team, lead, is_admin=True)

        response = await api.client.post(
            f"/api/teams/{team.id}/invitations",
            json={"email": "ghost@example.com"},
            headers=api.auth(lead),
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_team(self, api):
        lead = await api.add_user(make_user("lead@example.com"))

        response = await api.client.post(
            f"/api/teams/{uuid4()}/invitations",
            json={"email": "bob@example.com"},
            headers=api.auth(lead),
        )

        assert response.status_code == 404
