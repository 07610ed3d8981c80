"""Invitation use cases."""

from liftout.application.usecase.invitation.create_company_invitation import (
    CreateCompanyInvitationRequest,
    CreateCompanyInvitationResponse,
    CreateCompanyInvitationUseCase,
)
from liftout.application.usecase.invitation.create_team_invitation import (
    CreateTeamInvitationRequest,
    CreateTeamInvitationResponse,
    CreateTeamInvitationUseCase,
)
from liftout.application.usecase.invitation.get_invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
)
from liftout.application.usecase.invitation.list_company_invitations import (
    ListCompanyInvitationsRequest,
    ListCompanyInvitationsResponse,
    ListCompanyInvitationsUseCase,
)
from liftout.application.usecase.invitation.respond_to_invitation import (
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)

__all__ = [
    "CreateCompanyInvitationRequest",
    "CreateCompanyInvitationResponse",
    "CreateCompanyInvitationUseCase",
    "CreateTeamInvitationRequest",
    "CreateTeamInvitationResponse",
    "CreateTeamInvitationUseCase",
    "GetInvitationRequest",
    "GetInvitationResponse",
    "GetInvitationUseCase",
    "ListCompanyInvitationsRequest",
    "ListCompanyInvitationsResponse",
    "ListCompanyInvitationsUseCase",
    "RespondToInvitationRequest",
    "RespondToInvitationResponse",
    "RespondToInvitationUseCase",
]
