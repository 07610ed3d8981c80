"""Domain value objects for Liftout."""

from liftout.domain.value.identifiers import (
    CompanyId,
    CompanyUserId,
    InvitationId,
    OpportunityId,
    TeamId,
    TeamMemberId,
    UserId,
)
from liftout.domain.value.types import (
    AvailabilityStatus,
    CompanyRole,
    EmailAddress,
    InvitationAction,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    OpportunityStatus,
    Recommendation,
    RemoteStatus,
    TeamVisibility,
    Urgency,
    UserType,
    VerificationStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "TeamId",
    "TeamMemberId",
    "CompanyId",
    "CompanyUserId",
    "OpportunityId",
    "InvitationId",
    # Types
    "AvailabilityStatus",
    "CompanyRole",
    "EmailAddress",
    "InvitationAction",
    "InvitationKind",
    "InvitationStatus",
    "InvitationToken",
    "OpportunityStatus",
    "Recommendation",
    "RemoteStatus",
    "TeamVisibility",
    "Urgency",
    "UserType",
    "VerificationStatus",
]
