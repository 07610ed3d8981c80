"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from liftout.domain.model.invitation import Invitation
from liftout.domain.value import (
    EmailAddress,
    InvitationKind,
    InvitationToken,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Tokens are unique across all invitations. Consuming or declining an
    invitation is a single conditional write so that concurrent responders
    cannot both succeed.
    """

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        At most one unexpired outstanding invitation may exist per kind,
        target and invitee email. Expired outstanding invitations for the
        same invitee lose their token in the same write, so a new one can
        take their place.

        Args:
            invitation: The invitation to insert

        Returns:
            The stored invitation

        Raises:
            DuplicateTokenError: If another invitation already holds the token
            PendingInvitationExistsError: If the invitee already holds an
                unexpired outstanding invitation to the same target
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find the invitation currently holding a token.

        Consumed invitations have had their token cleared and are never
        returned.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def consume(
        self, token: InvitationToken, user_id: UserId, now: datetime
    ) -> Invitation | None:
        """Atomically accept a pending, unexpired invitation.

        Sets status to accepted, clears the token and records who accepted
        it and when, only where the token still matches, the status is
        pending and ``expires_at`` is after ``now``.

        Args:
            token: The invitation token
            user_id: The accepting user
            now: Reference time

        Returns:
            The accepted invitation, or None if no row matched
        """
        pass

    @abstractmethod
    async def decline(
        self, token: InvitationToken, now: datetime, retain: bool = False
    ) -> Invitation | None:
        """Atomically decline a pending, unexpired invitation.

        Args:
            token: The invitation token
            now: Reference time
            retain: Keep the row as declined with its token cleared instead
                of deleting it

        Returns:
            The invitation as it was declined, or None if no row matched
        """
        pass

    @abstractmethod
    async def list_by_target(
        self, kind: InvitationKind, target_id: UUID
    ) -> list[Invitation]:
        """List outstanding invitations for a team or company.

        Outstanding means pending and still holding a token, expired or not.

        Args:
            kind: Team or company
            target_id: The team or company ID

        Returns:
            Invitations, newest first
        """
        pass

    @abstractmethod
    async def list_by_invitee(
        self, email: EmailAddress, kind: InvitationKind | None, now: datetime
    ) -> list[Invitation]:
        """List unexpired outstanding invitations addressed to an email.

        Args:
            email: Invitee email
            kind: Optional filter by kind
            now: Reference time for expiry

        Returns:
            Invitations, newest first
        """
        pass
