"""Company and company membership entities."""

from datetime import datetime

from pydantic import Field

from liftout.domain.model.common import DomainModel, utcnow
from liftout.domain.value import (
    CompanyId,
    CompanyRole,
    CompanyUserId,
    UserId,
    VerificationStatus,
)


class Company(DomainModel):
    """A hiring company."""

    id: CompanyId
    name: str
    industry: str | None = None
    logo_url: str | None = None
    verification_status: VerificationStatus = VerificationStatus.UNVERIFIED
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED


class CompanyUser(DomainModel):
    """Active membership of a user in a company."""

    id: CompanyUserId
    company_id: CompanyId
    user_id: UserId
    role: CompanyRole = CompanyRole.MEMBER
    joined_at: datetime = Field(default_factory=utcnow)
