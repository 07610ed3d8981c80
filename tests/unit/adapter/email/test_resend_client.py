"""Unit tests for ResendEmailClient."""

import json

import httpx
import pytest

from liftout.adapter.email import NOT_CONFIGURED, ResendEmailClient
from liftout.config import EmailSettings
from liftout.domain.service import EmailAttachment


def _client(handler, api_key: str | None = "re_test") -> ResendEmailClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ResendEmailClient(EmailSettings(api_key=api_key), http_client=http_client)


class TestResendEmailClient:
    """Tests for sending through the Resend API."""

    @pytest.mark.asyncio
    async def test_missing_api_key_skips_send(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"id": "never"})

        result = await _client(handler, api_key=None).send(
            "bob@example.com", "Hi", "<p>Hi</p>"
        )

        assert result.success is False
        assert result.error == NOT_CONFIGURED
        assert calls == []

    @pytest.mark.asyncio
    async def test_successful_send(self):
        # Arrange
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "msg_123"})

        attachment = EmailAttachment(
            filename="meeting.ics",
            content=b"BEGIN:VCALENDAR",
            content_type="text/calendar",
        )

        # Act
        result = await _client(handler).send(
            "bob@example.com", "Meeting", "<p>Join</p>", (attachment,)
        )

        # Assert
        assert result.success is True
        assert result.message_id == "msg_123"
        assert seen["auth"] == "Bearer re_test"
        assert seen["body"]["to"] == ["bob@example.com"]
        assert seen["body"]["attachments"][0]["filename"] == "meeting.ics"
        assert seen["body"]["attachments"][0]["content"] == "QkVHSU46VkNBTEVOREFS"

    @pytest.mark.asyncio
    async def test_provider_error_is_reported(self):
        def handler(request):
            return httpx.Response(422, json={"message": "Invalid `to` field"})

        result = await _client(handler).send("bob@example.com", "Hi", "<p>Hi</p>")

        assert result.success is False
        assert "422" in result.error
        assert "Invalid `to` field" in result.error

    @pytest.mark.asyncio
    async def test_transport_error_is_reported(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        result = await _client(handler).send("bob@example.com", "Hi", "<p>Hi</p>")

        assert result.success is False
        assert "connection refused" in result.error
