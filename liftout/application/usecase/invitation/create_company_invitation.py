"""Invite someone to a company use case."""

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
    CompanyService,
    InvitationService,
    NotificationService,
    UserService,
)
from liftout.domain.value import CompanyId, CompanyRole, EmailAddress, InvitationKind

INVITABLE_ROLES = (CompanyRole.MEMBER, CompanyRole.ADMIN, CompanyRole.RECRUITER)


class CreateCompanyInvitationRequest(BaseModel):
    """Create company invitation request."""

    principal: Principal
    company_id: UUID
    invitee_email: str
    role: str
    message: str | None = None


class CreateCompanyInvitationResponse(CamelModel):
    """Create company invitation response."""

    success: bool = True
    invitation_id: UUID
    invite_link: str
    message: str
    email_sent: bool


class CreateCompanyInvitationUseCase(BaseUseCase):
    """Invite a person by email to join a company.

    Only owners and admins may invite. The invitee does not need an
    account yet; the invitation is bound to their email address.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        company_service: CompanyService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize create company invitation use case.

        Args:
            invitation_service: Invitation domain service
            company_service: Company domain service
            user_service: User domain service
            notification_service: Sends the invitation email
            settings: Application settings, for the invitation link
        """
        self.invitation_service = invitation_service
        self.company_service = company_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: CreateCompanyInvitationRequest
    ) -> CreateCompanyInvitationResponse:
        """Issue the invitation and email it.

        A failed email does not fail the request; ``email_sent`` reports it.

        Args:
            request: Company, invitee and role

        Returns:
            The new invitation's ID and link

        Raises:
            ValidationError: If the email or role is invalid, or the invitee
                is already a member
            NotAuthorizedError: If the caller is not an owner or admin
            NotFoundError: If the company does not exist
            PendingInvitationExistsError: If the invitee already has a pending
                invitation to the same target
        """
        principal = request.principal
        company_id = CompanyId(request.company_id)

        with logfire.span(
            "create_company_invitation.execute",
            company_id=str(company_id),
            user_id=str(principal.user_id),
        ):
            try:
                invitee_email = EmailAddress(root=request.invitee_email)
            except PydanticValidationError:
                raise ValidationError("Invalid email address")
            if request.role not in {r.value for r in INVITABLE_ROLES}:
                raise ValidationError(
                    "Invalid role. Must be member, admin, or recruiter"
                )

            membership = await self.company_service.get_membership(
                company_id, principal.user_id
            )
            if membership is None or not membership.role.can_manage:
                logfire.warn(
                    "Company invitation denied",
                    company_id=str(company_id),
                    user_id=str(principal.user_id),
                )
                raise NotAuthorizedError("Only company admins can send invitations")

            company = await self.company_service.get_company(company_id)
            if company is None:
                raise NotFoundError("Company", str(company_id))

            invitee = await self.user_service.find_by_email(invitee_email)
            if invitee is not None:
                existing = await self.company_service.get_membership(
                    company_id, invitee.id
                )
                if existing is not None:
                    raise ValidationError(
                        "This user is already a member of the company"
                    )

            invitation = await self.invitation_service.issue(
                kind=InvitationKind.COMPANY,
                target_id=company_id,
                role=request.role,
                invited_by=principal.user_id,
                invitee_email=invitee_email,
                invitee_user_id=invitee.id if invitee else None,
                message=request.message,
            )

            invite_link = (
                f"{self.settings.api.frontend_url}/invites/{invitation.token.root}"
            )
            inviter_name = await self.user_service.display_name(
                principal.user_id, "A colleague"
            )
            result = await self.notification_service.send_invitation(
                invitation, company.name, inviter_name, invite_link
            )

            return CreateCompanyInvitationResponse(
                invitation_id=invitation.id,
                invite_link=invite_link,
                message=(
                    "Invitation sent successfully"
                    if result.success
                    else "Invitation created, but the email could not be sent"
                ),
                email_sent=result.success,
            )
