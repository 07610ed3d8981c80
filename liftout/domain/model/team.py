"""Team and team membership entities."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from liftout.domain.model.common import DomainModel, utcnow
from liftout.domain.value import (
    AvailabilityStatus,
    RemoteStatus,
    TeamId,
    TeamMemberId,
    TeamVisibility,
    UserId,
    VerificationStatus,
)


class Team(DomainModel):
    """An existing team that wants to move employers together.

    ``skills`` is a roll-up of the skills of the team's active members and
    ``member_count`` counts them; neither is written directly.
    """

    id: TeamId
    name: str
    description: str | None = None
    industry: str | None = None
    specialization: str | None = None
    location: str | None = None
    remote_status: RemoteStatus = RemoteStatus.HYBRID
    size: int | None = None
    years_working_together: Decimal | None = None
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    verification_status: VerificationStatus = VerificationStatus.UNVERIFIED
    visibility: TeamVisibility = TeamVisibility.PUBLIC
    salary_expectation_min: int | None = None
    salary_expectation_max: int | None = None
    skills: list[str] = Field(default_factory=list)
    member_count: int = 0
    created_by: UserId | None = None
    created_at: datetime = Field(default_factory=utcnow)
    deleted_at: datetime | None = None

    @property
    def effective_size(self) -> int:
        """Declared size, or the active member count when none is declared."""
        return self.size or self.member_count


class TeamMember(DomainModel):
    """Active membership of a user in a team."""

    id: TeamMemberId
    team_id: TeamId
    user_id: UserId
    role: str = "member"
    is_admin: bool = False
    joined_at: datetime = Field(default_factory=utcnow)
