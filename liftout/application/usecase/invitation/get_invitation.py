"""Get invitation by token use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel
from liftout.domain.error import InvitationNotFoundError
from liftout.domain.service import (
    CompanyService,
    InvitationService,
    TeamService,
    UserService,
)
from liftout.domain.value import (
    CompanyId,
    InvitationKind,
    InvitationStatus,
    TeamId,
)

INVITER_FALLBACK = {
    InvitationKind.TEAM: "Team Member",
    InvitationKind.COMPANY: "Company Admin",
}


class GetInvitationRequest(BaseModel):
    """Get invitation request."""

    token: str


class InvitationDetails(CamelModel):
    id: UUID
    type: InvitationKind
    target_id: UUID
    target_name: str
    inviter_name: str
    invitee_email: str | None = None
    role: str
    message: str | None = None
    expires_at: datetime
    status: InvitationStatus


class GetInvitationResponse(CamelModel):
    """Get invitation response."""

    success: bool = True
    invitation: InvitationDetails


class GetInvitationUseCase:
    """Resolve an invitation link for the public invitation page.

    No authentication is needed; the token itself is the credential.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        company_service: CompanyService,
        user_service: UserService,
    ) -> None:
        """Initialize get invitation use case.

        Args:
            invitation_service: Invitation domain service
            team_service: Team domain service
            company_service: Company domain service
            user_service: User domain service
        """
        self.invitation_service = invitation_service
        self.team_service = team_service
        self.company_service = company_service
        self.user_service = user_service

    async def execute(self, request: GetInvitationRequest) -> GetInvitationResponse:
        """Look up the invitation behind a token.

        Args:
            request: Request with the token from the link

        Returns:
            Invitation details

        Raises:
            InvitationNotFoundError: If the token is unknown, used, or its
                team or company no longer exists
            InvitationExpiredError: If the invitation has expired
        """
        with logfire.span("get_invitation.execute", token=request.token[:8] + "..."):
            invitation = await self.invitation_service.lookup(request.token)

            if invitation.kind == InvitationKind.TEAM:
                target = await self.team_service.get_team(TeamId(invitation.target_id))
            else:
                target = await self.company_service.get_company(
                    CompanyId(invitation.target_id)
                )
            if target is None:
                raise InvitationNotFoundError()

            inviter_name = await self.user_service.display_name(
                invitation.invited_by, INVITER_FALLBACK[invitation.kind]
            )

            return GetInvitationResponse(
                invitation=InvitationDetails(
                    id=invitation.id,
                    type=invitation.kind,
                    target_id=invitation.target_id,
                    target_name=target.name,
                    inviter_name=inviter_name,
                    invitee_email=(
                        invitation.invitee_email.root
                        if invitation.invitee_email
                        else None
                    ),
                    role=invitation.role,
                    message=invitation.message,
                    expires_at=invitation.expires_at,
                    status=invitation.status,
                )
            )
