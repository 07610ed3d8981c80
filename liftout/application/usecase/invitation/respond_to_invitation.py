"""Accept or decline an invitation use case."""

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.config import AuthSettings
from liftout.domain.error import NotAuthenticatedError, ValidationError
from liftout.domain.service import InvitationService, TeamService
from liftout.domain.value import InvitationAction, InvitationKind, TeamId


class RespondToInvitationRequest(BaseModel):
    """Respond to invitation request."""

    token: str
    action: str | None = None
    principal: Principal | None = None


class RespondToInvitationResponse(CamelModel):
    """Respond to invitation response."""

    success: bool = True
    message: str
    redirect_to: str


class RespondToInvitationUseCase:
    """Accept or decline an invitation on behalf of the signed-in user."""

    def __init__(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize respond to invitation use case.

        Args:
            invitation_service: Invitation domain service
            team_service: Team domain service, for the joined team's name
            auth_settings: Auth settings, for the sign-in redirect
        """
        self.invitation_service = invitation_service
        self.team_service = team_service
        self.auth_settings = auth_settings

    async def execute(
        self, request: RespondToInvitationRequest
    ) -> RespondToInvitationResponse:
        """Apply the requested action to the invitation.

        The action is checked before authentication, and authentication
        before the token is looked up.

        Args:
            request: Token, action and caller

        Returns:
            Outcome message and where the frontend should go next

        Raises:
            ValidationError: If the action is not accept or decline
            NotAuthenticatedError: If there is no signed-in caller
            InvitationNotFoundError: If the token is unknown or already used
            InvitationExpiredError: If the invitation has expired
            NotAuthorizedError: If the invitation is for another email
        """
        try:
            action = InvitationAction(request.action)
        except ValueError:
            raise ValidationError("Invalid action. Must be accept or decline")

        if request.principal is None:
            raise NotAuthenticatedError(
                redirect_to=(
                    f"{self.auth_settings.signin_path}"
                    f"?callbackUrl=/invites/{request.token}"
                )
            )
        principal = request.principal

        with logfire.span(
            "respond_to_invitation.execute",
            action=action.value,
            user_id=str(principal.user_id),
        ):
            if action == InvitationAction.DECLINE:
                await self.invitation_service.decline(
                    request.token, principal.user_id, principal.email
                )
                return RespondToInvitationResponse(
                    message="Invitation declined", redirect_to="/app/dashboard"
                )

            invitation = await self.invitation_service.accept(
                request.token, principal.user_id, principal.email
            )
            if invitation.kind == InvitationKind.COMPANY:
                return RespondToInvitationResponse(
                    message="You've joined the company!", redirect_to="/app/company"
                )

            team = await self.team_service.get_team(TeamId(invitation.target_id))
            team_name = team.name if team else "the team"
            return RespondToInvitationResponse(
                message=f"You've joined {team_name}!",
                redirect_to=f"/app/teams/{invitation.target_id}",
            )
