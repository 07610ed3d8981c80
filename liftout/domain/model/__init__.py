"""Domain model entities for Liftout."""

from liftout.domain.model.company import Company, CompanyUser
from liftout.domain.model.invitation import Invitation
from liftout.domain.model.match import MatchScore
from liftout.domain.model.meeting import Meeting
from liftout.domain.model.opportunity import Opportunity
from liftout.domain.model.team import Team, TeamMember
from liftout.domain.model.user import User

__all__ = [
    "User",
    "Team",
    "TeamMember",
    "Company",
    "CompanyUser",
    "Opportunity",
    "Invitation",
    "MatchScore",
    "Meeting",
]
