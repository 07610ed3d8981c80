"""Invitation entity.

Invitations grant a single user membership of a team or a company. Each one
carries an opaque token that is the only way to address it before the
invitee signs in.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from liftout.domain.model.common import DomainModel, utcnow
from liftout.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Tokens are unique and single use; consuming one clears it
    - ``expired`` is derived from ``expires_at`` at read time and never stored
    - Only the invitee email (when set) may respond
    """

    id: InvitationId
    kind: InvitationKind
    target_id: UUID  # TeamId or CompanyId depending on kind
    role: str
    invitee_email: Optional[EmailAddress] = None
    invitee_user_id: Optional[UserId] = None
    invited_by: UserId
    message: Optional[str] = None
    token: Optional[InvitationToken] = None
    status: InvitationStatus = InvitationStatus.PENDING
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)
    responded_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_expired(self, now: datetime) -> bool:
        """Check whether the invitation has passed its expiry."""
        return now > self.expires_at

    def effective_status(self, now: datetime) -> InvitationStatus:
        """Stored status, with pending turned into expired once past expiry."""
        if self.status == InvitationStatus.PENDING and self.is_expired(now):
            return InvitationStatus.EXPIRED
        return self.status

    @property
    def is_outstanding(self) -> bool:
        """Pending and still holding a token."""
        return self.status == InvitationStatus.PENDING and self.token is not None
