"""Transactional email clients.

Delivery goes through the Resend HTTP API.
"""

import httpx
import logfire

from liftout.adapter.error import EmailDeliveryError
from liftout.config import EmailSettings
from liftout.domain.service.notification_service import (
    EmailAttachment,
    EmailClient,
    EmailResult,
)

NOT_CONFIGURED = "Email service not configured"


class ResendEmailClient(EmailClient):
    """Email client backed by the Resend HTTP API.

    Failures are logged and returned in the result; nothing is retried.
    """

    def __init__(
        self, settings: EmailSettings, http_client: httpx.AsyncClient | None = None
    ) -> None:
        """Initialize Resend client.

        Args:
            settings: Email settings
            http_client: Shared HTTP client (a fresh one per send otherwise)
        """
        self.settings = settings
        self.http_client = http_client

    async def send(
        self,
        to: str,
        subject: str,
        html: str,
        attachments: tuple[EmailAttachment, ...] = (),
    ) -> EmailResult:
        """Send one email through Resend."""
        if not self.settings.api_key:
            logfire.info("Email skipped, no API key configured", subject=subject)
            return EmailResult(success=False, error=NOT_CONFIGURED)

        payload: dict = {
            "from": self.settings.from_address,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        if attachments:
            payload["attachments"] = [
                {
                    "filename": a.filename,
                    "content": a.encoded(),
                    "content_type": a.content_type,
                }
                for a in attachments
            ]

        with logfire.span("resend.send", subject=subject):
            try:
                message_id = await self._post(payload)
            except EmailDeliveryError as e:
                logfire.error("Email delivery failed", subject=subject, error=str(e))
                return EmailResult(success=False, error=str(e))

            logfire.info("Email sent", message_id=message_id)
            return EmailResult(success=True, message_id=message_id)

    async def _post(self, payload: dict) -> str | None:
        headers = {"Authorization": f"Bearer {self.settings.api_key}"}
        try:
            if self.http_client is not None:
                response = await self.http_client.post(
                    self.settings.api_url,
                    json=payload,
                    headers=headers,
                    timeout=self.settings.timeout_seconds,
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self.settings.api_url,
                        json=payload,
                        headers=headers,
                        timeout=self.settings.timeout_seconds,
                    )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"HTTP error sending email: {e}")

        if response.status_code >= 400:
            try:
                detail = response.json().get("message") or response.text
            except ValueError:
                detail = response.text
            raise EmailDeliveryError(
                f"Email provider returned {response.status_code}: {detail}"
            )

        try:
            return response.json().get("id")
        except ValueError:
            return None


class MockEmailClient(EmailClient):
    """Email client that records messages instead of sending them.

    Addresses listed in ``fail_for`` get a failed result.
    """

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.sent: list[dict] = []
        self.fail_for = fail_for or set()

    async def send(
        self,
        to: str,
        subject: str,
        html: str,
        attachments: tuple[EmailAttachment, ...] = (),
    ) -> EmailResult:
        if to in self.fail_for:
            return EmailResult(success=False, error="Mailbox unavailable")

        self.sent.append(
            {
                "to": to,
                "subject": subject,
                "html": html,
                "attachments": list(attachments),
            }
        )
        return EmailResult(success=True, message_id=f"mock-{len(self.sent)}")
