"""Opportunity entity."""

from datetime import datetime

from pydantic import Field

from liftout.domain.model.common import DomainModel, utcnow
from liftout.domain.value import (
    CompanyId,
    OpportunityId,
    OpportunityStatus,
    RemoteStatus,
    Urgency,
    UserId,
)


class Opportunity(DomainModel):
    """A role a company wants to fill with a whole team.

    Business rules:
    - Status moves from open to filled or closed and never back
    - Expired opportunities (``expires_at`` in the past) are not matched
    """

    id: OpportunityId
    company_id: CompanyId
    title: str
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    remote_policy: RemoteStatus | None = None
    compensation_min: int | None = None
    compensation_max: int | None = None
    compensation_currency: str = "USD"
    team_size_min: int | None = None
    team_size_max: int | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    urgency: Urgency = Urgency.STANDARD
    status: OpportunityStatus = OpportunityStatus.OPEN
    featured: bool = False
    application_count: int = 0
    expires_at: datetime | None = None
    created_by: UserId | None = None
    created_at: datetime = Field(default_factory=utcnow)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now > self.expires_at
