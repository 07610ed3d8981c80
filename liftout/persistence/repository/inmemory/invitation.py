"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from liftout.domain.error import DuplicateTokenError, PendingInvitationExistsError
from liftout.domain.model import Invitation
from liftout.domain.repository import InvitationRepository
from liftout.domain.value import (
    EmailAddress,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    UserId,
)

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository.

    No method awaits between reading and writing the store, so consume
    and decline cannot interleave with each other on one event loop.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _respondable(self, token: InvitationToken, now: datetime) -> Optional[Invitation]:
        for invitation in self._store.invitations.values():
            if (
                invitation.token == token
                and invitation.status == InvitationStatus.PENDING
                and not invitation.is_expired(now)
            ):
                return invitation
        return None

    async def create(self, invitation: Invitation) -> Invitation:
        """Store an invitation.

        Raises:
            DuplicateTokenError: If another invitation holds the same token
            PendingInvitationExistsError: If the invitee already holds an
                unexpired outstanding invitation to the same target
        """
        if invitation.token is not None and any(
            existing.token == invitation.token
            for existing in self._store.invitations.values()
        ):
            raise DuplicateTokenError()

        if invitation.invitee_email is not None:
            same_invitee = [
                existing
                for existing in self._store.invitations.values()
                if existing.kind == invitation.kind
                and existing.target_id == invitation.target_id
                and existing.invitee_email == invitation.invitee_email
                and existing.is_outstanding
            ]
            if any(not e.is_expired(invitation.created_at) for e in same_invitee):
                raise PendingInvitationExistsError()
            for expired in same_invitee:
                self._store.invitations[expired.id] = expired.model_copy(
                    update={"token": None}
                )

        self._store.invitations[invitation.id] = invitation
        return invitation

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        for invitation in self._store.invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def consume(
        self, token: InvitationToken, user_id: UserId, now: datetime
    ) -> Optional[Invitation]:
        invitation = self._respondable(token, now)
        if invitation is None:
            return None
        accepted = invitation.model_copy(
            update={
                "status": InvitationStatus.ACCEPTED,
                "token": None,
                "accepted_by_user_id": user_id,
                "responded_at": now,
            }
        )
        self._store.invitations[invitation.id] = accepted
        return accepted

    async def decline(
        self, token: InvitationToken, now: datetime, retain: bool = False
    ) -> Optional[Invitation]:
        invitation = self._respondable(token, now)
        if invitation is None:
            return None
        if not retain:
            return self._store.invitations.pop(invitation.id)
        declined = invitation.model_copy(
            update={
                "status": InvitationStatus.DECLINED,
                "token": None,
                "responded_at": now,
            }
        )
        self._store.invitations[invitation.id] = declined
        return declined

    async def list_by_target(
        self, kind: InvitationKind, target_id: UUID
    ) -> list[Invitation]:
        found = [
            inv
            for inv in self._store.invitations.values()
            if inv.kind == kind and inv.target_id == target_id and inv.is_outstanding
        ]
        return sorted(found, key=lambda i: i.created_at, reverse=True)

    async def list_by_invitee(
        self, email: EmailAddress, kind: InvitationKind | None, now: datetime
    ) -> list[Invitation]:
        found = [
            inv
            for inv in self._store.invitations.values()
            if inv.invitee_email == email
            and (kind is None or inv.kind == kind)
            and inv.is_outstanding
            and not inv.is_expired(now)
        ]
        return sorted(found, key=lambda i: i.created_at, reverse=True)
