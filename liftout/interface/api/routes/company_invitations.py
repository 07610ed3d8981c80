"""Company invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.invitation import (
    CreateCompanyInvitationRequest,
    CreateCompanyInvitationResponse,
    CreateCompanyInvitationUseCase,
    ListCompanyInvitationsRequest,
    ListCompanyInvitationsResponse,
    ListCompanyInvitationsUseCase,
)
from liftout.domain.service import JWTService
from liftout.interface.api.auth import require_principal

router = APIRouter(
    prefix="/api/companies/invitations",
    tags=["company-invitations"],
    route_class=DishkaRoute,
)


class CreateCompanyInvitationAPIRequest(CamelModel):
    """API request for inviting someone to a company."""

    company_id: UUID
    invitee_email: str
    role: str
    message: str | None = None


@router.post(
    "",
    response_model=CreateCompanyInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_company_invitation(
    request: CreateCompanyInvitationAPIRequest,
    create_use_case: FromDishka[CreateCompanyInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCompanyInvitationResponse:
    """Invite someone to a company by email.

    Args:
        request: Company, invitee email, role and note
        create_use_case: Create company invitation use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The invitation ID and link, and whether the email went out
    """
    principal = require_principal(jwt_service, auth_token, authorization)
    return await create_use_case.execute(
        CreateCompanyInvitationRequest(
            principal=principal,
            company_id=request.company_id,
            invitee_email=request.invitee_email,
            role=request.role,
            message=request.message,
        )
    )


@router.get("", response_model=ListCompanyInvitationsResponse)
async def list_company_invitations(
    list_use_case: FromDishka[ListCompanyInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    company_id: UUID | None = Query(default=None, alias="companyId"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCompanyInvitationsResponse:
    """List a company's invitations, or the caller's own without a company."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_use_case.execute(
        ListCompanyInvitationsRequest(principal=principal, company_id=company_id)
    )
