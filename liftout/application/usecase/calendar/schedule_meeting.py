"""Schedule meeting use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from liftout.application.usecase.base import CamelModel, Principal
from liftout.domain.error import ValidationError
from liftout.domain.model import Meeting
from liftout.domain.model.common import utcnow
from liftout.domain.service import (
    CalendarService,
    NotificationService,
    RecipientResult,
    UserService,
)
from liftout.domain.value import EmailAddress

MIN_DURATION = 15
MAX_DURATION = 480


class ScheduleMeetingRequest(BaseModel):
    """Schedule meeting request."""

    principal: Principal
    title: str
    description: str | None = None
    starts_at: datetime | None = None
    duration: int
    attendees: list[str] = Field(default_factory=list)
    location: str | None = None
    meeting_link: str | None = None
    send_invites: bool = False


class MeetingSummary(CamelModel):
    title: str
    description: str | None = None
    starts_at: datetime = Field(alias="datetime")
    duration: int
    location: str | None = None
    meeting_link: str | None = None
    attendees: list[str]


class EmailResultItem(CamelModel):
    email: str
    success: bool
    error: str | None = None


class ScheduleMeetingResponse(CamelModel):
    """Schedule meeting response."""

    success: bool = True
    meeting: MeetingSummary
    ics_content: str
    email_results: list[EmailResultItem] | None = None


class ScheduleMeetingUseCase:
    """Build a calendar invitation and optionally email it to attendees.

    Each attendee's delivery is reported separately; a failed send never
    fails the request.
    """

    def __init__(
        self,
        calendar_service: CalendarService,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> None:
        """Initialize schedule meeting use case.

        Args:
            calendar_service: Validates and renders the meeting
            notification_service: Emails the invitations
            user_service: Resolves the organizer's name
        """
        self.calendar_service = calendar_service
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: ScheduleMeetingRequest) -> ScheduleMeetingResponse:
        """Validate the meeting, render ICS and send invitations.

        Args:
            request: Meeting details

        Returns:
            The meeting, its ICS document and per-attendee email results

        Raises:
            ValidationError: If a field is missing or invalid, or the
                meeting starts in the past
        """
        if (
            not request.title.strip()
            or request.starts_at is None
            or not request.duration
        ):
            raise ValidationError("Missing required fields: title, datetime, duration")
        if not MIN_DURATION <= request.duration <= MAX_DURATION:
            raise ValidationError(
                f"Duration must be between {MIN_DURATION} and {MAX_DURATION} minutes"
            )

        attendees, invalid = [], []
        for address in request.attendees:
            try:
                attendees.append(EmailAddress(root=address))
            except PydanticValidationError:
                invalid.append(address)
        if invalid:
            raise ValidationError(f"Invalid email addresses: {', '.join(invalid)}")

        starts_at = request.starts_at
        if starts_at.tzinfo is None:
            starts_at = starts_at.replace(tzinfo=timezone.utc)

        principal = request.principal
        organizer_name = None
        if principal.email is not None:
            organizer_name = await self.user_service.display_name(
                principal.user_id, principal.email.root
            )

        meeting = Meeting(
            title=request.title.strip(),
            description=request.description,
            starts_at=starts_at,
            duration_minutes=request.duration,
            location=request.location,
            meeting_link=request.meeting_link,
            attendees=attendees,
            organizer_name=organizer_name,
            organizer_email=principal.email,
        )

        now = utcnow()
        with logfire.span(
            "schedule_meeting.execute",
            user_id=str(principal.user_id),
            attendees=len(attendees),
            send_invites=request.send_invites,
        ):
            self.calendar_service.validate(meeting, now)
            ics_content = self.calendar_service.build_ics(meeting, now)

            results: list[RecipientResult] = []
            if request.send_invites and attendees:
                results = await self.notification_service.send_meeting_invitations(
                    meeting, ics_content, organizer_name
                )

            return ScheduleMeetingResponse(
                meeting=MeetingSummary(
                    title=meeting.title,
                    description=meeting.description,
                    starts_at=meeting.starts_at,
                    duration=meeting.duration_minutes,
                    location=meeting.location,
                    meeting_link=meeting.meeting_link,
                    attendees=[a.root for a in attendees],
                ),
                ics_content=ics_content,
                email_results=(
                    [EmailResultItem(**r.model_dump()) for r in results]
                    if results
                    else None
                ),
            )
