"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

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
from liftout.persistence.mappers import invitation_to_dict, row_to_invitation
from liftout.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository.

    Accept and decline are single statements whose WHERE clause re-checks
    token, status and expiry, so the database arbitrates concurrent
    responders.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _respondable(self, token: InvitationToken, now: datetime):
        return and_(
            invitations_table.c.invite_token == token.root,
            invitations_table.c.status == InvitationStatus.PENDING.value,
            invitations_table.c.expires_at >= now,
        )

    async def create(self, invitation: Invitation) -> Invitation:
        """Insert an invitation inside a savepoint.

        Expired outstanding invitations for the same invitee and target give
        up their token first. ``uq_invitations_pending_invitee`` then admits
        one outstanding invitation per invitee, and a unique violation rolls
        back only the savepoint so the caller can retry with a new token in
        the same transaction.

        Raises:
            DuplicateTokenError: If the token is already taken
            PendingInvitationExistsError: If the invitee already holds an
                unexpired outstanding invitation to the same target
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        try:
            async with self.session.begin_nested():
                if invitation.invitee_email is not None:
                    await self.session.execute(self._retire_expired(invitation))
                await self.session.execute(stmt)
        except IntegrityError as e:
            if "idx_invitations_token" in str(e.orig):
                raise DuplicateTokenError()
            if "uq_invitations_pending_invitee" in str(e.orig):
                raise PendingInvitationExistsError()
            raise
        logfire.debug("Invitation row inserted", invitation_id=str(invitation.id))
        return invitation

    def _retire_expired(self, invitation: Invitation):
        return (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.kind == invitation.kind.value,
                    invitations_table.c.target_id == invitation.target_id,
                    func.lower(invitations_table.c.invitee_email)
                    == invitation.invitee_email.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.invite_token.is_not(None),
                    invitations_table.c.expires_at < invitation.created_at,
                )
            )
            .values(invite_token=None)
        )

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        stmt = select(invitations_table).where(
            invitations_table.c.invite_token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def consume(
        self, token: InvitationToken, user_id: UserId, now: datetime
    ) -> Optional[Invitation]:
        stmt = (
            update(invitations_table)
            .where(self._respondable(token, now))
            .values(
                status=InvitationStatus.ACCEPTED.value,
                invite_token=None,
                accepted_by_user_id=user_id,
                responded_at=now,
            )
            .returning(invitations_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_invitation(dict(row)) if row else None

    async def decline(
        self, token: InvitationToken, now: datetime, retain: bool = False
    ) -> Optional[Invitation]:
        if retain:
            stmt = (
                update(invitations_table)
                .where(self._respondable(token, now))
                .values(
                    status=InvitationStatus.DECLINED.value,
                    invite_token=None,
                    responded_at=now,
                )
                .returning(invitations_table)
            )
        else:
            stmt = (
                delete(invitations_table)
                .where(self._respondable(token, now))
                .returning(invitations_table)
            )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_invitation(dict(row)) if row else None

    async def list_by_target(
        self, kind: InvitationKind, target_id: UUID
    ) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.kind == kind.value,
                    invitations_table.c.target_id == target_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.invite_token.is_not(None),
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def list_by_invitee(
        self, email: EmailAddress, kind: InvitationKind | None, now: datetime
    ) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    func.lower(invitations_table.c.invitee_email) == email.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.invite_token.is_not(None),
                    invitations_table.c.expires_at >= now,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        if kind is not None:
            stmt = stmt.where(invitations_table.c.kind == kind.value)
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
