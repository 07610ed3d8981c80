"""Calendar domain service: meeting validation and ICS generation."""

import re
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from liftout.domain.error import ValidationError
from liftout.domain.model import Meeting

from .base import Service

PRODID = "-//Liftout//Meeting Scheduler//EN"
REMINDER_MINUTES = 30

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _ics_datetime(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def escape_text(value: str) -> str:
    """Escape a TEXT property value (RFC 5545 section 3.3.11)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\r", "\\n")
        .replace("\n", "\\n")
    )


def param_value(value: str) -> str:
    """Render a property parameter value (RFC 5545 section 3.2).

    DQUOTE and control characters are not allowed; values containing
    ``:``, ``;`` or ``,`` are quoted.
    """
    value = _CONTROL_CHARS.sub("", value).replace('"', "")
    if any(c in value for c in ":;,"):
        return f'"{value}"'
    return value


def uri_value(value: str) -> str:
    """Render a URI property value with control characters removed."""
    return _CONTROL_CHARS.sub("", value)


def fold_line(line: str, limit: int = 75) -> list[str]:
    """Split a content line into octet-bounded chunks for folding."""
    chunks: list[str] = []
    current = ""
    for char in line:
        width = limit if not chunks else limit - 1
        if len((current + char).encode("utf-8")) > width:
            chunks.append(current)
            current = char
        else:
            current += char
    chunks.append(current)
    return chunks


class CalendarService(Service):
    """Domain service that validates meetings and renders them as ICS."""

    def validate(self, meeting: Meeting, now: datetime) -> None:
        """Check a meeting can be scheduled.

        Args:
            meeting: The meeting
            now: Reference time

        Raises:
            ValidationError: If the meeting starts in the past or the
                meeting link is not a plain http(s) URL
        """
        if meeting.starts_at < now:
            raise ValidationError("Cannot schedule meetings in the past")
        link = meeting.meeting_link
        if link and (
            _CONTROL_CHARS.search(link)
            or not link.lower().startswith(("http://", "https://"))
        ):
            raise ValidationError("Invalid meeting link")

    def build_ics(self, meeting: Meeting, now: datetime, uid: str | None = None) -> str:
        """Render a meeting as an iCalendar REQUEST.

        Args:
            meeting: The meeting
            now: Timestamp for DTSTAMP
            uid: Event UID (generated when omitted)

        Returns:
            ICS document with CRLF line endings
        """
        with logfire.span("calendar_service.build_ics", title=meeting.title):
            uid = uid or f"{uuid4()}@liftout.com"

            description = meeting.description or ""
            if meeting.meeting_link:
                description = f"{description}\n\nMeeting link: {meeting.meeting_link}".strip()

            lines = [
                "BEGIN:VCALENDAR",
                "VERSION:2.0",
                f"PRODID:{PRODID}",
                "CALSCALE:GREGORIAN",
                "METHOD:REQUEST",
                "BEGIN:VEVENT",
                f"UID:{uid}",
                f"DTSTAMP:{_ics_datetime(now)}",
                f"DTSTART:{_ics_datetime(meeting.starts_at)}",
                f"DTEND:{_ics_datetime(meeting.ends_at)}",
                f"SUMMARY:{escape_text(meeting.title)}",
                f"DESCRIPTION:{escape_text(description)}",
            ]

            location = meeting.location or meeting.meeting_link
            if location:
                lines.append(f"LOCATION:{escape_text(location)}")
            if meeting.meeting_link:
                lines.append(f"URL:{uri_value(meeting.meeting_link)}")
            if meeting.organizer_email:
                name = param_value(meeting.organizer_name or meeting.organizer_email.root)
                lines.append(
                    f"ORGANIZER;CN={name}:mailto:{meeting.organizer_email.root}"
                )
            for attendee in meeting.attendees:
                lines.append(f"ATTENDEE;RSVP=TRUE:mailto:{attendee.root}")

            lines.extend(
                [
                    "BEGIN:VALARM",
                    "ACTION:DISPLAY",
                    f"DESCRIPTION:{escape_text(meeting.title)} starts soon",
                    f"TRIGGER:-PT{REMINDER_MINUTES}M",
                    "END:VALARM",
                    "STATUS:CONFIRMED",
                    "END:VEVENT",
                    "END:VCALENDAR",
                ]
            )

            folded: list[str] = []
            for line in lines:
                first, *rest = fold_line(line)
                folded.append(first)
                folded.extend(" " + chunk for chunk in rest)

            logfire.info("ICS generated", uid=uid, attendees=len(meeting.attendees))
            return "\r\n".join(folded) + "\r\n"
