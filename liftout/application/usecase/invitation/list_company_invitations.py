"""List company invitations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.domain.error import NotAuthorizedError
from liftout.domain.model.common import utcnow
from liftout.domain.service import CompanyService, InvitationService
from liftout.domain.value import CompanyId, InvitationKind, InvitationStatus


class ListCompanyInvitationsRequest(BaseModel):
    """List company invitations request."""

    principal: Principal
    company_id: UUID | None = None


class CompanyInvitationItem(CamelModel):
    id: UUID
    company_id: UUID
    company_name: str | None = None
    invitee_email: str | None = None
    role: str
    status: InvitationStatus
    expires_at: datetime
    created_at: datetime


class ListCompanyInvitationsResponse(CamelModel):
    """List company invitations response."""

    invitations: list[CompanyInvitationItem]


class ListCompanyInvitationsUseCase:
    """List a company's outstanding invitations, or the caller's own."""

    def __init__(
        self, invitation_service: InvitationService, company_service: CompanyService
    ) -> None:
        self.invitation_service = invitation_service
        self.company_service = company_service

    async def execute(
        self, request: ListCompanyInvitationsRequest
    ) -> ListCompanyInvitationsResponse:
        """List invitations.

        With a company ID, owners and admins see every outstanding
        invitation, expired ones marked as such. Without one, the caller
        sees the unexpired invitations addressed to their email.

        Raises:
            NotAuthorizedError: If the caller cannot manage the company
        """
        principal = request.principal
        now = utcnow()

        with logfire.span(
            "list_company_invitations.execute",
            company_id=str(request.company_id) if request.company_id else None,
            user_id=str(principal.user_id),
        ):
            if request.company_id is not None:
                company_id = CompanyId(request.company_id)
                membership = await self.company_service.get_membership(
                    company_id, principal.user_id
                )
                if membership is None or not membership.role.can_manage:
                    raise NotAuthorizedError(
                        "You do not have permission to view invitations"
                    )
                invitations = await self.invitation_service.list_for_target(
                    InvitationKind.COMPANY, company_id
                )
            elif principal.email is None:
                invitations = []
            else:
                invitations = await self.invitation_service.list_for_invitee(
                    principal.email, InvitationKind.COMPANY, now
                )

            companies = await self.company_service.get_companies(
                [CompanyId(inv.target_id) for inv in invitations]
            )
            items = []
            for inv in invitations:
                company = companies.get(CompanyId(inv.target_id))
                items.append(
                    CompanyInvitationItem(
                        id=inv.id,
                        company_id=inv.target_id,
                        company_name=company.name if company else None,
                        invitee_email=(
                            inv.invitee_email.root if inv.invitee_email else None
                        ),
                        role=inv.role,
                        status=inv.effective_status(now),
                        expires_at=inv.expires_at,
                        created_at=inv.created_at,
                    )
                )
            return ListCompanyInvitationsResponse(invitations=items)
