"""End-to-end tests for meeting scheduling."""

from datetime import timedelta

import pytest

from liftout.domain.model.common import utcnow
from tests.conftest import make_user


def _meeting(**overrides) -> dict:
    body = {
        "title": "Intro call",
        "description": "Meet the team",
        "datetime": (utcnow() + timedelta(days=2)).isoformat(),
        "duration": 30,
        "attendees": ["bob@example.com", "carol@example.com"],
        "meetingLink": "https://meet.example.com/intro",
    }
    body.update(overrides)
    return body


class TestScheduleMeeting:
    """Tests for POST /api/calendar/schedule."""

    @pytest.mark.asyncio
    async def test_returns_ics_without_sending(self, api):
        alice = await api.add_user(make_user("alice@example.com"))

        response = await api.client.post(
            "/api/calendar/schedule", json=_meeting(), headers=api.auth(alice)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["meeting"]["title"] == "Intro call"
        assert data["meeting"]["duration"] == 30
        assert data["meeting"]["meetingLink"] == "https://meet.example.com/intro"
        assert "datetime" in data["meeting"]
        assert data["icsContent"].startswith("BEGIN:VCALENDAR\r\n")
        assert "ORGANIZER;CN=Alice Smith:mailto:alice@example.com" in data["icsContent"]
        assert "emailResults" not in data
        assert (await api.emails()).sent == []

    @pytest.mark.asyncio
    async def test_sends_invites_and_reports_each_recipient(self, api):
        # Arrange
        alice = await api.add_user(make_user("alice@example.com"))
        emails = await api.emails()
        emails.fail_for.add("carol@example.com")

        # Act
        response = await api.client.post(
            "/api/calendar/schedule",
            json=_meeting(sendInvites=True),
            headers=api.auth(alice),
        )

        # Assert
        assert response.status_code == 200
        results = {r["email"]: r for r in response.json()["emailResults"]}
        assert results["bob@example.com"]["success"] is True
        assert results["carol@example.com"]["success"] is False
        assert results["carol@example.com"]["error"] == "Mailbox unavailable"
        sent = emails.sent[-1]
        assert sent["to"] == "bob@example.com"
        assert sent["attachments"][0].filename == "meeting.ics"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, error",
        [
            ({"title": ""}, "Missing required fields: title, datetime, duration"),
            ({"datetime": None}, "Missing required fields: title, datetime, duration"),
            ({"duration": 10}, "Duration must be between 15 and 480 minutes"),
            ({"duration": 481}, "Duration must be between 15 and 480 minutes"),
            (
                {"attendees": ["ok@example.com", "nope", "also bad"]},
                "Invalid email addresses: nope, also bad",
            ),
            (
                {"datetime": (utcnow() - timedelta(hours=1)).isoformat()},
                "Cannot schedule meetings in the past",
            ),
            (
                {"meetingLink": "https://meet.example.com/x\r\nATTENDEE:mailto:evil@example.com"},
                "Invalid meeting link",
            ),
            ({"meetingLink": "javascript:alert(1)"}, "Invalid meeting link"),
        ],
    )
    async def test_validation(self, api, overrides, error):
        alice = await api.add_user(make_user("alice@example.com"))

        response = await api.client.post(
            "/api/calendar/schedule", json=_meeting(**overrides), headers=api.auth(alice)
        )

        assert response.status_code == 400
        assert response.json() == {"error": error}

    @pytest.mark.asyncio
    async def test_requires_sign_in(self, api):
        response = await api.client.post("/api/calendar/schedule", json=_meeting())

        assert response.status_code == 401
