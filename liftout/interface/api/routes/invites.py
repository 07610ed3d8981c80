"""Public invitation link routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)
from liftout.domain.service import JWTService
from liftout.interface.api.auth import optional_principal

router = APIRouter(prefix="/api/invites", tags=["invites"], route_class=DishkaRoute)


class RespondAPIRequest(CamelModel):
    """API request for answering an invitation."""

    action: str | None = None


@router.get("/{token}", response_model=GetInvitationResponse)
async def get_invitation(
    token: str,
    get_invitation_use_case: FromDishka[GetInvitationUseCase],
) -> GetInvitationResponse:
    """Show the invitation behind a link. No sign-in needed.

    Args:
        token: Token from the invitation link
        get_invitation_use_case: Get invitation use case from DI

    Returns:
        Invitation details; 404 when unknown or used, 410 when expired
    """
    return await get_invitation_use_case.execute(GetInvitationRequest(token=token))


@router.post("/{token}", response_model=RespondToInvitationResponse)
async def respond_to_invitation(
    token: str,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    request: RespondAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RespondToInvitationResponse:
    """Accept or decline an invitation.

    Unauthenticated callers get a 401 carrying a sign-in redirect back to
    the invitation page.
    """
    return await respond_use_case.execute(
        RespondToInvitationRequest(
            token=token,
            action=request.action if request else None,
            principal=optional_principal(jwt_service, auth_token, authorization),
        )
    )
