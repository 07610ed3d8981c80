"""Unit tests for CalendarService."""

from datetime import datetime, timedelta, timezone

import pytest

from liftout.domain.error import ValidationError
from liftout.domain.model import Meeting
from liftout.domain.service import CalendarService
from liftout.domain.service.calendar_service import escape_text, fold_line, param_value
from liftout.domain.value import EmailAddress

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def _meeting(**overrides) -> Meeting:
    values = {
        "title": "Intro call",
        "description": "Meet the team",
        "starts_at": datetime(2026, 3, 2, 15, 30, tzinfo=timezone.utc),
        "duration_minutes": 45,
        "attendees": [
            EmailAddress(root="bob@example.com"),
            EmailAddress(root="carol@example.com"),
        ],
        "organizer_name": "Alice Smith",
        "organizer_email": EmailAddress(root="alice@example.com"),
    }
    values.update(overrides)
    return Meeting(**values)


class TestEscaping:
    """Tests for TEXT escaping and line folding."""

    def test_escape_text(self):
        assert escape_text("a,b;c\\d\ne") == r"a\,b\;c\\d\ne"

    def test_escape_crlf(self):
        assert escape_text("one\r\ntwo") == r"one\ntwo"

    def test_lone_carriage_return_is_escaped(self):
        escaped = escape_text("Intro\rX-INJECT:1")

        assert "\r" not in escaped
        assert escaped == r"Intro\nX-INJECT:1"

    def test_param_value_quotes_separators(self):
        assert param_value("Alice Smith") == "Alice Smith"
        assert param_value("Smith, Alice") == '"Smith, Alice"'
        assert param_value('Eve "x";ROLE=CHAIR') == '"Eve x;ROLE=CHAIR"'
        assert param_value("Eve\r\nATTENDEE:x") == '"EveATTENDEE:x"'

    def test_short_line_is_not_folded(self):
        assert fold_line("SUMMARY:short") == ["SUMMARY:short"]

    def test_long_line_is_folded_by_octets(self):
        chunks = fold_line("X" * 200)

        assert len(chunks[0]) == 75
        assert all(len(c) <= 74 for c in chunks[1:])
        assert "".join(chunks) == "X" * 200

    def test_multibyte_characters_are_not_split(self):
        line = "SUMMARY:" + "é" * 60
        chunks = fold_line(line)

        assert "".join(chunks) == line
        assert all(len(c.encode("utf-8")) <= 75 for c in chunks)


class TestValidate:
    """Tests for validate."""

    def test_past_meeting_is_rejected(self):
        service = CalendarService()
        meeting = _meeting(starts_at=NOW - timedelta(minutes=1))

        with pytest.raises(ValidationError):
            service.validate(meeting, NOW)

    def test_future_meeting_is_accepted(self):
        CalendarService().validate(_meeting(), NOW)

    @pytest.mark.parametrize(
        "link",
        [
            "https://meet.example.com/x\r\nATTENDEE:mailto:evil@example.com",
            "https://meet.example.com/x\rX-INJECT:1",
            "ftp://meet.example.com/x",
            "meet.example.com/x",
        ],
    )
    def test_invalid_meeting_link_is_rejected(self, link):
        with pytest.raises(ValidationError, match="Invalid meeting link"):
            CalendarService().validate(_meeting(meeting_link=link), NOW)


class TestBuildIcs:
    """Tests for build_ics."""

    def test_document_structure(self):
        # Act
        ics = CalendarService().build_ics(_meeting(), NOW, uid="fixed@liftout.com")

        # Assert
        assert ics.endswith("\r\n")
        lines = ics.split("\r\n")[:-1]
        assert lines[0] == "BEGIN:VCALENDAR"
        assert lines[-1] == "END:VCALENDAR"
        assert "METHOD:REQUEST" in lines
        assert "UID:fixed@liftout.com" in lines
        assert "DTSTAMP:20260301T090000Z" in lines
        assert "DTSTART:20260302T153000Z" in lines
        assert "DTEND:20260302T161500Z" in lines
        assert "ORGANIZER;CN=Alice Smith:mailto:alice@example.com" in lines
        assert "ATTENDEE;RSVP=TRUE:mailto:bob@example.com" in lines
        assert "ATTENDEE;RSVP=TRUE:mailto:carol@example.com" in lines
        assert "TRIGGER:-PT30M" in lines

    def test_non_utc_start_is_converted(self):
        paris = timezone(timedelta(hours=1))
        meeting = _meeting(starts_at=datetime(2026, 3, 2, 16, 30, tzinfo=paris))

        ics = CalendarService().build_ics(meeting, NOW, uid="x@liftout.com")

        assert "DTSTART:20260302T153000Z" in ics.split("\r\n")

    def test_meeting_link_is_location_fallback(self):
        meeting = _meeting(location=None, meeting_link="https://meet.example.com/abc")

        lines = CalendarService().build_ics(meeting, NOW).split("\r\n")

        assert "LOCATION:https://meet.example.com/abc" in lines
        assert "URL:https://meet.example.com/abc" in lines

    def test_long_description_is_folded(self):
        meeting = _meeting(description="Agenda, goals; next steps " * 10)

        ics = CalendarService().build_ics(meeting, NOW)

        for line in ics.split("\r\n"):
            assert len(line.encode("utf-8")) <= 75
        assert "\r\n " in ics
        unfolded = ics.replace("\r\n ", "")
        assert r"DESCRIPTION:Agenda\, goals\; next steps" in unfolded

    def test_line_breaks_in_link_cannot_add_properties(self):
        meeting = _meeting(
            meeting_link="https://meet.example.com/x\r\nATTENDEE:mailto:evil@example.com"
        )

        lines = CalendarService().build_ics(meeting, NOW).replace("\r\n ", "").split("\r\n")

        assert "ATTENDEE:mailto:evil@example.com" not in lines
        assert not any(line.startswith("ATTENDEE:") for line in lines)
        assert "URL:https://meet.example.com/xATTENDEE:mailto:evil@example.com" in lines

    def test_organizer_name_with_comma_is_quoted(self):
        meeting = _meeting(organizer_name="Smith, Alice")

        lines = CalendarService().build_ics(meeting, NOW).split("\r\n")

        assert 'ORGANIZER;CN="Smith, Alice":mailto:alice@example.com' in lines
