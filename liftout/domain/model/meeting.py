"""Meeting value used for calendar invitations."""

from datetime import datetime, timedelta

from pydantic import Field

from liftout.domain.model.common import DomainModel
from liftout.domain.value import EmailAddress


class Meeting(DomainModel):
    """A scheduled meeting. Not persisted."""

    title: str
    description: str | None = None
    starts_at: datetime
    duration_minutes: int = Field(ge=15, le=480)
    location: str | None = None
    meeting_link: str | None = None
    attendees: list[EmailAddress] = Field(default_factory=list)
    organizer_name: str | None = None
    organizer_email: EmailAddress | None = None

    @property
    def ends_at(self) -> datetime:
        return self.starts_at + timedelta(minutes=self.duration_minutes)
