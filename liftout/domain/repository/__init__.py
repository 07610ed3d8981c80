"""Repository interfaces for the Liftout domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from liftout.domain.repository.company import CompanyRepository
from liftout.domain.repository.invitation import InvitationRepository
from liftout.domain.repository.membership import MembershipRepository
from liftout.domain.repository.opportunity import OpportunityRepository
from liftout.domain.repository.team import TeamRepository
from liftout.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TeamRepository",
    "CompanyRepository",
    "MembershipRepository",
    "OpportunityRepository",
    "InvitationRepository",
]
