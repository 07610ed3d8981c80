"""PostgreSQL repository implementations."""

from .company import PostgresCompanyRepository
from .invitation import PostgresInvitationRepository
from .membership import PostgresMembershipRepository
from .opportunity import PostgresOpportunityRepository
from .team import PostgresTeamRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresCompanyRepository",
    "PostgresInvitationRepository",
    "PostgresMembershipRepository",
    "PostgresOpportunityRepository",
    "PostgresTeamRepository",
    "PostgresUserRepository",
]
