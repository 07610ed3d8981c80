"""Strongly typed identifiers for Liftout domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TeamId = NewType("TeamId", UUID)
TeamMemberId = NewType("TeamMemberId", UUID)
CompanyId = NewType("CompanyId", UUID)
CompanyUserId = NewType("CompanyUserId", UUID)
OpportunityId = NewType("OpportunityId", UUID)
InvitationId = NewType("InvitationId", UUID)
