"""Domain value objects for Liftout.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from liftout.domain.value.common import RootValueObject

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserType(str, Enum):
    """Kind of account."""

    INDIVIDUAL = "individual"
    COMPANY = "company"
    ADMIN = "admin"


class RemoteStatus(str, Enum):
    """Where a team works, or where an opportunity expects them to."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class AvailabilityStatus(str, Enum):
    """How open a team is to new opportunities."""

    AVAILABLE = "available"
    SELECTIVE = "selective"
    ENGAGED = "engaged"
    NOT_AVAILABLE = "not_available"


class VerificationStatus(str, Enum):
    """Verification state of a team or company."""

    UNVERIFIED = "unverified"
    PENDING = "pending"
    VERIFIED = "verified"


class TeamVisibility(str, Enum):
    """Who can discover a team.

    Anonymous teams are only shown to verified companies, with identifying
    fields masked.
    """

    PUBLIC = "public"
    PRIVATE = "private"
    ANONYMOUS = "anonymous"


class CompanyRole(str, Enum):
    """Role of a user within a company."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    RECRUITER = "recruiter"

    @property
    def can_manage(self) -> bool:
        """Owners and admins manage invitations and opportunities."""
        return self in (CompanyRole.OWNER, CompanyRole.ADMIN)


class Urgency(str, Enum):
    """How urgently a company wants to fill an opportunity."""

    LOW = "low"
    STANDARD = "standard"
    HIGH = "high"
    CRITICAL = "critical"


class OpportunityStatus(str, Enum):
    """Lifecycle of an opportunity: open -> filled | closed."""

    OPEN = "open"
    FILLED = "filled"
    CLOSED = "closed"


class InvitationKind(str, Enum):
    """What an invitation grants membership of."""

    TEAM = "team"
    COMPANY = "company"


class InvitationStatus(str, Enum):
    """Stored status of an invitation.

    ``EXPIRED`` is never stored; it is derived at read time from
    ``expires_at``.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"


class InvitationAction(str, Enum):
    """Response an invitee can give."""

    ACCEPT = "accept"
    DECLINE = "decline"


class Recommendation(str, Enum):
    """Match score tier."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class InvitationToken(RootValueObject[str]):
    """Opaque, single-use invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is non-empty and bounded."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def masked(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."


class EmailAddress(RootValueObject[str]):
    """Email address, normalized to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate basic address shape and normalize."""
        v = v.strip().lower()
        if not _EMAIL_RE.match(v) or len(v) > 255:
            raise ValueError(f"Invalid email address: {v}")
        return v
