"""Invitation domain service."""

import secrets
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from liftout.config import InvitationSettings
from liftout.domain.error import (
    DuplicateTokenError,
    InvitationExpiredError,
    InvitationNotFoundError,
    NotAuthorizedError,
)
from liftout.domain.model import CompanyUser, Invitation, TeamMember
from liftout.domain.model.common import utcnow
from liftout.domain.repository import (
    InvitationRepository,
    MembershipRepository,
    UserRepository,
)
from liftout.domain.value import (
    CompanyId,
    CompanyRole,
    CompanyUserId,
    EmailAddress,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    TeamId,
    TeamMemberId,
    UserId,
    UserType,
)

from .base import Service

TokenFactory = Callable[[int], str]


class InvitationService(Service):
    """Domain service for the invitation token workflow.

    States: pending -> accepted, pending -> declined, and pending -> expired
    once ``now`` passes ``expires_at`` (derived, never stored).
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
        settings: InvitationSettings,
        token_factory: TokenFactory = secrets.token_hex,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            membership_repository: Membership repository, written on accept
            user_repository: User repository, written on company accept
            settings: Invitation settings
            token_factory: Returns a fresh token for a number of random bytes
        """
        self.invitation_repository = invitation_repository
        self.membership_repository = membership_repository
        self.user_repository = user_repository
        self.settings = settings
        self.token_factory = token_factory

    async def issue(
        self,
        kind: InvitationKind,
        target_id: UUID,
        role: str,
        invited_by: UserId,
        invitee_email: EmailAddress | None = None,
        invitee_user_id: UserId | None = None,
        message: str | None = None,
        now: datetime | None = None,
    ) -> Invitation:
        """Create a pending invitation with a fresh token.

        A token that collides with an existing one is replaced and the
        insert retried, up to ``max_token_attempts`` times.

        Args:
            kind: Team or company invitation
            target_id: The team or company ID
            role: Role granted on accept
            invited_by: User sending the invitation
            invitee_email: Address the invitation is restricted to
            invitee_user_id: Invitee, when already registered
            message: Optional personal note
            now: Reference time (defaults to the current time)

        Returns:
            The stored invitation

        Raises:
            DuplicateTokenError: If every attempt collided
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.issue",
            kind=kind.value,
            target_id=str(target_id),
            invited_by=str(invited_by),
        ):
            for attempt in range(1, self.settings.max_token_attempts + 1):
                invitation = Invitation(
                    id=InvitationId(uuid4()),
                    kind=kind,
                    target_id=target_id,
                    role=role,
                    invitee_email=invitee_email,
                    invitee_user_id=invitee_user_id,
                    invited_by=invited_by,
                    message=message,
                    token=InvitationToken(
                        root=self.token_factory(self.settings.token_bytes)
                    ),
                    status=InvitationStatus.PENDING,
                    expires_at=now + timedelta(days=self.settings.expiry_days),
                    created_at=now,
                )
                try:
                    saved = await self.invitation_repository.create(invitation)
                except DuplicateTokenError:
                    logfire.warn("Invitation token collision", attempt=attempt)
                    continue

                logfire.info(
                    "Invitation issued",
                    invitation_id=str(saved.id),
                    kind=kind.value,
                    expires_at=saved.expires_at.isoformat(),
                )
                return saved

            logfire.error(
                "Could not generate a unique invitation token",
                attempts=self.settings.max_token_attempts,
            )
            raise DuplicateTokenError()

    async def lookup(self, token: str, now: datetime | None = None) -> Invitation:
        """Find the pending invitation behind a token.

        Unknown, consumed and declined tokens are indistinguishable.

        Args:
            token: Token from the invitation link
            now: Reference time (defaults to the current time)

        Returns:
            The pending, unexpired invitation

        Raises:
            InvitationNotFoundError: If no pending invitation holds the token
            InvitationExpiredError: If the invitation has expired
        """
        now = now or utcnow()
        masked = token[:8] + "..."
        with logfire.span("invitation_service.lookup", token=masked):
            if not token or not token.strip():
                raise InvitationNotFoundError()
            try:
                invitation_token = InvitationToken(root=token)
            except PydanticValidationError:
                raise InvitationNotFoundError()

            invitation = await self.invitation_repository.find_by_token(
                invitation_token
            )
            if invitation is None or invitation.status != InvitationStatus.PENDING:
                logfire.info("Invitation not found", token=masked)
                raise InvitationNotFoundError()

            if invitation.is_expired(now):
                logfire.info(
                    "Invitation expired",
                    invitation_id=str(invitation.id),
                    expires_at=invitation.expires_at.isoformat(),
                )
                raise InvitationExpiredError()

            return invitation

    async def accept(
        self,
        token: str,
        user_id: UserId,
        email: EmailAddress | None,
        now: datetime | None = None,
    ) -> Invitation:
        """Accept an invitation and activate the membership it grants.

        The token is consumed by a single conditional write, so of two
        concurrent accepts only one activates a membership.

        Args:
            token: Token from the invitation link
            user_id: Accepting user
            email: Accepting user's email
            now: Reference time (defaults to the current time)

        Returns:
            The accepted invitation

        Raises:
            InvitationNotFoundError: If the token is unknown or already used
            InvitationExpiredError: If the invitation has expired
            NotAuthorizedError: If the invitation is for another email
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.accept", token=token[:8] + "...", user_id=str(user_id)
        ):
            invitation = await self.lookup(token, now)
            self._check_invitee(invitation, email)

            consumed = await self.invitation_repository.consume(
                InvitationToken(root=token), user_id, now
            )
            if consumed is None:
                logfire.warn(
                    "Invitation consumed concurrently",
                    invitation_id=str(invitation.id),
                )
                raise InvitationNotFoundError()

            await self._activate(consumed, user_id, now)
            logfire.info(
                "Invitation accepted",
                invitation_id=str(consumed.id),
                kind=consumed.kind.value,
                user_id=str(user_id),
            )
            return consumed

    async def decline(
        self,
        token: str,
        user_id: UserId,
        email: EmailAddress | None,
        now: datetime | None = None,
    ) -> Invitation:
        """Decline an invitation.

        The row is deleted, or kept as declined with its token cleared when
        ``retain_declined`` is set. Either way the token stops resolving.

        Args:
            token: Token from the invitation link
            user_id: Declining user
            email: Declining user's email
            now: Reference time (defaults to the current time)

        Returns:
            The invitation as it was declined

        Raises:
            InvitationNotFoundError: If the token is unknown or already used
            InvitationExpiredError: If the invitation has expired
            NotAuthorizedError: If the invitation is for another email
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.decline", token=token[:8] + "...", user_id=str(user_id)
        ):
            invitation = await self.lookup(token, now)
            self._check_invitee(invitation, email)

            declined = await self.invitation_repository.decline(
                InvitationToken(root=token), now, retain=self.settings.retain_declined
            )
            if declined is None:
                raise InvitationNotFoundError()

            logfire.info(
                "Invitation declined",
                invitation_id=str(declined.id),
                retained=self.settings.retain_declined,
            )
            return declined

    async def list_for_target(
        self, kind: InvitationKind, target_id: UUID
    ) -> list[Invitation]:
        """Outstanding invitations for a team or company, expired ones included."""
        with logfire.span(
            "invitation_service.list_for_target",
            kind=kind.value,
            target_id=str(target_id),
        ):
            return await self.invitation_repository.list_by_target(kind, target_id)

    async def list_for_invitee(
        self,
        email: EmailAddress,
        kind: InvitationKind | None = None,
        now: datetime | None = None,
    ) -> list[Invitation]:
        """Unexpired outstanding invitations addressed to an email."""
        now = now or utcnow()
        with logfire.span("invitation_service.list_for_invitee"):
            return await self.invitation_repository.list_by_invitee(email, kind, now)

    def _check_invitee(
        self, invitation: Invitation, email: EmailAddress | None
    ) -> None:
        if invitation.invitee_email is None:
            return
        if email is None or email != invitation.invitee_email:
            logfire.warn(
                "Invitation responder email mismatch",
                invitation_id=str(invitation.id),
            )
            raise NotAuthorizedError(
                "This invitation was sent to a different email address"
            )

    async def _activate(
        self, invitation: Invitation, user_id: UserId, now: datetime
    ) -> None:
        if invitation.kind == InvitationKind.TEAM:
            await self.membership_repository.add_team_member(
                TeamMember(
                    id=TeamMemberId(uuid4()),
                    team_id=TeamId(invitation.target_id),
                    user_id=user_id,
                    role=invitation.role,
                    is_admin=invitation.role == "admin",
                    joined_at=now,
                )
            )
            return

        await self.membership_repository.add_company_user(
            CompanyUser(
                id=CompanyUserId(uuid4()),
                company_id=CompanyId(invitation.target_id),
                user_id=user_id,
                role=CompanyRole(invitation.role),
                joined_at=now,
            )
        )
        await self.user_repository.set_user_type(user_id, UserType.COMPANY)
