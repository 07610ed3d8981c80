"""Notification domain service.

Outbound email goes through an ``EmailClient`` port implemented in the
adapter layer. Sends never raise; every recipient gets its own result.
"""

import asyncio
import base64
from abc import ABC, abstractmethod
from html import escape

import logfire
from pydantic import BaseModel

from liftout.domain.model import Invitation, Meeting
from liftout.domain.value import InvitationKind

from .base import Service


class EmailAttachment(BaseModel):
    """File attached to an email."""

    filename: str
    content: bytes
    content_type: str

    def encoded(self) -> str:
        """Base64 content, as email APIs expect it."""
        return base64.b64encode(self.content).decode("ascii")


class EmailResult(BaseModel):
    """Outcome of a single send."""

    success: bool
    message_id: str | None = None
    error: str | None = None


class RecipientResult(BaseModel):
    """Outcome of a send to one recipient of a batch."""

    email: str
    success: bool
    error: str | None = None


class EmailClient(ABC):
    """Port for transactional email delivery."""

    @abstractmethod
    async def send(
        self,
        to: str,
        subject: str,
        html: str,
        attachments: tuple[EmailAttachment, ...] = (),
    ) -> EmailResult:
        """Send one email.

        Implementations report failures in the result instead of raising.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body
            attachments: Files to attach

        Returns:
            Result of the send
        """
        pass


class NotificationService(Service):
    """Domain service composing and sending notification emails."""

    def __init__(self, email_client: EmailClient) -> None:
        """Initialize notification service.

        Args:
            email_client: Email delivery port
        """
        self.email_client = email_client

    async def send_invitation(
        self,
        invitation: Invitation,
        target_name: str,
        inviter_name: str,
        invite_link: str,
    ) -> EmailResult:
        """Email an invitation link to its invitee.

        Args:
            invitation: The issued invitation (must carry an invitee email)
            target_name: Team or company name
            inviter_name: Who sent the invitation
            invite_link: Absolute link to the invitation page

        Returns:
            Result of the send
        """
        if invitation.invitee_email is None:
            return EmailResult(success=False, error="Invitation has no email address")

        noun = "team" if invitation.kind == InvitationKind.TEAM else "company"
        subject = f"{inviter_name} invited you to join {target_name} on Liftout"
        body = [
            f"<p><strong>{escape(inviter_name)}</strong> invited you to join the "
            f"{noun} <strong>{escape(target_name)}</strong> as {escape(invitation.role)}.</p>",
        ]
        if invitation.message:
            body.append(f"<blockquote>{escape(invitation.message)}</blockquote>")
        body.append(f'<p><a href="{escape(invite_link)}">View invitation</a></p>')
        body.append(
            f"<p>This invitation expires on {invitation.expires_at:%B %d, %Y}.</p>"
        )

        with logfire.span(
            "notification_service.send_invitation", invitation_id=str(invitation.id)
        ):
            result = await self.email_client.send(
                invitation.invitee_email.root, subject, "\n".join(body)
            )
            if not result.success:
                logfire.warn(
                    "Invitation email not sent",
                    invitation_id=str(invitation.id),
                    error=result.error,
                )
            return result

    async def send_meeting_invitations(
        self, meeting: Meeting, ics_content: str, organizer_name: str | None
    ) -> list[RecipientResult]:
        """Email a meeting invitation with its ICS file to every attendee.

        Sends run concurrently; one failing recipient does not affect others.

        Args:
            meeting: The meeting
            ics_content: Rendered ICS document
            organizer_name: Name shown as the inviter

        Returns:
            One result per attendee, in attendee order
        """
        attachment = EmailAttachment(
            filename="meeting.ics",
            content=ics_content.encode("utf-8"),
            content_type="text/calendar; charset=utf-8; method=REQUEST",
        )
        subject = f"Meeting Invitation: {meeting.title}"
        html = self._meeting_html(meeting, organizer_name or "Someone")

        with logfire.span(
            "notification_service.send_meeting_invitations",
            attendees=len(meeting.attendees),
        ):
            results = await asyncio.gather(
                *(
                    self.email_client.send(a.root, subject, html, (attachment,))
                    for a in meeting.attendees
                )
            )
            recipient_results = [
                RecipientResult(email=a.root, success=r.success, error=r.error)
                for a, r in zip(meeting.attendees, results)
            ]
            logfire.info(
                "Meeting invitations sent",
                sent=sum(1 for r in recipient_results if r.success),
                failed=sum(1 for r in recipient_results if not r.success),
            )
            return recipient_results

    def _meeting_html(self, meeting: Meeting, organizer_name: str) -> str:
        parts = [
            f"<p><strong>{escape(organizer_name)}</strong> has invited you to a meeting on Liftout.</p>",
            f"<h2>{escape(meeting.title)}</h2>",
            f"<p><strong>When:</strong> {meeting.starts_at:%A, %B %d, %Y %H:%M %Z}</p>",
            f"<p><strong>Duration:</strong> {meeting.duration_minutes} minutes</p>",
        ]
        if meeting.location:
            parts.append(f"<p><strong>Location:</strong> {escape(meeting.location)}</p>")
        if meeting.meeting_link:
            link = escape(meeting.meeting_link)
            parts.append(f'<p><strong>Meeting Link:</strong> <a href="{link}">{link}</a></p>')
        if meeting.description:
            parts.append(f"<p>{escape(meeting.description)}</p>")
        parts.append("<p>A calendar invitation is attached to this email.</p>")
        return "\n".join(parts)
