"""In-memory repository implementations for testing and local runs."""

from .company import InMemoryCompanyRepository
from .invitation import InMemoryInvitationRepository
from .membership import InMemoryMembershipRepository
from .opportunity import InMemoryOpportunityRepository
from .store import InMemoryStore
from .team import InMemoryTeamRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCompanyRepository",
    "InMemoryInvitationRepository",
    "InMemoryMembershipRepository",
    "InMemoryOpportunityRepository",
    "InMemoryStore",
    "InMemoryTeamRepository",
    "InMemoryUserRepository",
]
