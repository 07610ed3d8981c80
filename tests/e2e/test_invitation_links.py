"""End-to-end tests for invitation links."""

from datetime import timedelta
from uuid import uuid4

import pytest

from liftout.domain.model import CompanyUser
from liftout.domain.model.common import utcnow
from liftout.domain.repository import MembershipRepository, UserRepository
from liftout.domain.service import InvitationService
from liftout.domain.value import (
    CompanyRole,
    CompanyUserId,
    EmailAddress,
    InvitationKind,
    UserType,
)
from tests.conftest import make_company, make_team, make_user

NOT_FOUND = "Invitation not found or already used"


async def _issue(api, kind, target_id, inviter, email="bob@example.com", **kwargs):
    service = await api.get(InvitationService)
    return await service.issue(
        kind=kind,
        target_id=target_id,
        role=kwargs.pop("role", "member"),
        invited_by=inviter.id,
        invitee_email=EmailAddress(root=email),
        **kwargs,
    )


class TestGetInvitation:
    """Tests for GET /api/invites/{token}."""

    @pytest.mark.asyncio
    async def test_shows_invitation_without_sign_in(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        team = await api.add_team(make_team("Platform Team"))
        invitation = await _issue(
            api, InvitationKind.TEAM, team.id, alice, message="Join us"
        )

        # Act
        response = await api.client.get(f"/api/invites/{invitation.token.root}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        details = data["invitation"]
        assert details["type"] == "team"
        assert details["targetId"] == str(team.id)
        assert details["targetName"] == "Platform Team"
        assert details["inviterName"] == "Alice Smith"
        assert details["inviteeEmail"] == "bob@example.com"
        assert details["message"] == "Join us"
        assert details["status"] == "pending"

    @pytest.mark.asyncio
    async def test_unknown_and_used_tokens_get_the_same_404(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        bob = await api.add_user(make_user("bob@example.com", first_name="Bob"))
        team = await api.add_team(make_team())
        invitation = await _issue(api, InvitationKind.TEAM, team.id, alice)
        token = invitation.token.root
        accepted = await api.client.post(
            f"/api/invites/{token}", json={"action": "accept"}, headers=api.auth(bob)
        )
        assert accepted.status_code == 200

        # Act
        unknown = await api.client.get(f"/api/invites/{'0' * 64}")
        used = await api.client.get(f"/api/invites/{token}")

        # Assert
        assert unknown.status_code == used.status_code == 404
        assert unknown.json() == used.json() == {"error": NOT_FOUND}

    @pytest.mark.asyncio
    async def test_expired_invitation_is_gone_on_get_and_post(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        bob = await api.add_user(make_user("bob@example.com"))
        team = await api.add_team(make_team())
        invitation = await _issue(
            api,
            InvitationKind.TEAM,
            team.id,
            alice,
            now=utcnow() - timedelta(days=8),
        )
        token = invitation.token.root

        # Act
        got = await api.client.get(f"/api/invites/{token}")
        posted = await api.client.post(
            f"/api/invites/{token}", json={"action": "accept"}, headers=api.auth(bob)
        )
        again = await api.client.get(f"/api/invites/{token}")

        # Assert
        assert got.status_code == posted.status_code == again.status_code == 410
        assert got.json() == {"error": "This invitation has expired"}
        memberships = await api.get(MembershipRepository)
        assert await memberships.find_team_member(team.id, bob.id) is None


class TestRespondToInvitation:
    """Tests for POST /api/invites/{token}."""

    @pytest.mark.asyncio
    async def test_invalid_action_is_checked_before_auth(self, api):
        response = await api.client.post("/api/invites/whatever", json={"action": "maybe"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid action. Must be accept or decline"}

    @pytest.mark.asyncio
    async def test_unauthenticated_gets_sign_in_redirect(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        team = await api.add_team(make_team())
        invitation = await _issue(api, InvitationKind.TEAM, team.id, alice)
        token = invitation.token.root

        # Act
        response = await api.client.post(
            f"/api/invites/{token}", json={"action": "accept"}
        )

        # Assert
        assert response.status_code == 401
        data = response.json()
        assert data["requiresAuth"] is True
        assert data["redirectTo"] == f"/auth/signin?callbackUrl=/invites/{token}"

        # Token untouched
        assert (await api.client.get(f"/api/invites/{token}")).status_code == 200

    @pytest.mark.asyncio
    async def test_invalid_session_token_is_treated_as_signed_out(self, api):
        response = await api.client.post(
            "/api/invites/abc",
            json={"action": "decline"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["requiresAuth"] is True

    @pytest.mark.asyncio
    async def test_accept_team_invitation(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        bob = await api.add_user(make_user("bob@example.com"))
        team = await api.add_team(make_team("Platform Team"))
        invitation = await _issue(api, InvitationKind.TEAM, team.id, alice)

        # Act
        response = await api.client.post(
            f"/api/invites/{invitation.token.root}",
            json={"action": "accept"},
            headers=api.auth(bob),
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "You've joined Platform Team!",
            "redirectTo": f"/app/teams/{team.id}",
        }
        memberships = await api.get(MembershipRepository)
        assert await memberships.find_team_member(team.id, bob.id) is not None

    @pytest.mark.asyncio
    async def test_accept_company_invitation(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        bob = await api.add_user(make_user("bob@example.com"))
        company = make_company()
        await api.add_company(
            company,
            CompanyUser(
                id=CompanyUserId(uuid4()),
                company_id=company.id,
                user_id=alice.id,
                role=CompanyRole.OWNER,
            ),
        )
        invitation = await _issue(
            api, InvitationKind.COMPANY, company.id, alice, role="recruiter"
        )
        session_token = api.auth(bob)["Authorization"].removeprefix("Bearer ")

        # Act
        response = await api.client.post(
            f"/api/invites/{invitation.token.root}",
            json={"action": "accept"},
            headers={"Cookie": f"auth_token={session_token}"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["redirectTo"] == "/app/company"
        memberships = await api.get(MembershipRepository)
        joined = await memberships.find_company_user(company.id, bob.id)
        assert joined.role == CompanyRole.RECRUITER
        users = await api.get(UserRepository)
        assert (await users.find_by_id(bob.id)).user_type == UserType.COMPANY

    @pytest.mark.asyncio
    async def test_decline_then_link_is_dead(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        bob = await api.add_user(make_user("bob@example.com"))
        team = await api.add_team(make_team())
        invitation = await _issue(api, InvitationKind.TEAM, team.id, alice)
        token = invitation.token.root

        # Act
        declined = await api.client.post(
            f"/api/invites/{token}", json={"action": "decline"}, headers=api.auth(bob)
        )
        lookup = await api.client.get(f"/api/invites/{token}")

        # Assert
        assert declined.status_code == 200
        assert declined.json()["redirectTo"] == "/app/dashboard"
        assert lookup.status_code == 404

    @pytest.mark.asyncio
    async def test_wrong_account_is_forbidden(self, api):
        alice = await api.add_user(make_user("alice@example.com"))
        mallory = await api.add_user(make_user("mallory@example.com"))
        team = await api.add_team(make_team())
        invitation = await _issue(api, InvitationKind.TEAM, team.id, alice)

        response = await api.client.post(
            f"/api/invites/{invitation.token.root}",
            json={"action": "accept"},
            headers=api.auth(mallory),
        )

        assert response.status_code == 403
