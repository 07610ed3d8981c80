"""Invite a registered user to a team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from liftout.application.usecase.base import BaseUseCase, CamelModel, Principal
from liftout.config import Settings
from liftout.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from liftout.domain.service import (
    InvitationService,
    NotificationService,
    TeamService,
    UserService,
)
from liftout.domain.value import EmailAddress, InvitationKind, TeamId

TEAM_ROLES = ("member", "lead", "admin")


class CreateTeamInvitationRequest(BaseModel):
    """Create team invitation request."""

    principal: Principal
    team_id: UUID
    email: str
    role: str = "member"
    message: str | None = None


class CreateTeamInvitationResponse(CamelModel):
    """Create team invitation response."""

    success: bool = True
    invitation_id: UUID
    invite_link: str
    message: str
    email_sent: bool


class CreateTeamInvitationUseCase(BaseUseCase):
    """Invite a registered user to join a team.

    Only team admins may invite.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.team_service = team_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: CreateTeamInvitationRequest
    ) -> CreateTeamInvitationResponse:
        """Issue a team invitation and email it.

        Args:
            request: Team, invitee and role

        Returns:
            The new invitation's ID and link

        Raises:
            ValidationError: If the email or role is invalid, or the invitee
                is already a member
            NotFoundError: If the team or the invitee does not exist
            NotAuthorizedError: If the caller is not a team admin
            PendingInvitationExistsError: If the invitee already has a pending
                invitation to the same target
        """
        principal = request.principal
        team_id = TeamId(request.team_id)

        with logfire.span(
            "create_team_invitation.execute",
            team_id=str(team_id),
            user_id=str(principal.user_id),
        ):
            try:
                invitee_email = EmailAddress(root=request.email)
            except PydanticValidationError:
                raise ValidationError("Invalid email address")
            if request.role not in TEAM_ROLES:
                raise ValidationError("Invalid role. Must be member, lead, or admin")

            team = await self.team_service.get_team(team_id)
            if team is None:
                raise NotFoundError("Team", str(team_id))

            caller = await self.team_service.get_member(team_id, principal.user_id)
            if caller is None or not caller.is_admin:
                raise NotAuthorizedError("Only team admins can send invitations")

            invitee = await self.user_service.find_by_email(invitee_email)
            if invitee is None:
                raise NotFoundError("User", invitee_email.root)
            if await self.team_service.get_member(team_id, invitee.id) is not None:
                raise ValidationError("This user is already a member of the team")

            invitation = await self.invitation_service.issue(
                kind=InvitationKind.TEAM,
                target_id=team_id,
                role=request.role,
                invited_by=principal.user_id,
                invitee_email=invitee_email,
                invitee_user_id=invitee.id,
                message=request.message,
            )

            invite_link = (
                f"{self.settings.api.frontend_url}/invites/{invitation.token.root}"
            )
            inviter_name = await self.user_service.display_name(
                principal.user_id, "A teammate"
            )
            result = await self.notification_service.send_invitation(
                invitation, team.name, inviter_name, invite_link
            )

            return CreateTeamInvitationResponse(
                invitation_id=invitation.id,
                invite_link=invite_link,
                message=(
                    "Invitation sent successfully"
                    if result.success
                    else "Invitation created, but the email could not be sent"
                ),
                email_sent=result.success,
            )
