"""Company domain service."""

import logfire

from liftout.domain.model import Company, CompanyUser
from liftout.domain.repository import CompanyRepository, MembershipRepository
from liftout.domain.value import CompanyId, UserId

from .base import Service


class CompanyService(Service):
    """Domain service for companies and their members."""

    def __init__(
        self,
        company_repository: CompanyRepository,
        membership_repository: MembershipRepository,
    ) -> None:
        """Initialize company service.

        Args:
            company_repository: Company repository
            membership_repository: Membership repository
        """
        self.company_repository = company_repository
        self.membership_repository = membership_repository

    async def get_company(self, company_id: CompanyId) -> Company | None:
        """Get a company by ID.

        Args:
            company_id: Company ID

        Returns:
            Company if found, None otherwise
        """
        with logfire.span("company_service.get_company", company_id=str(company_id)):
            company = await self.company_repository.find_by_id(company_id)
            if company is None:
                logfire.warn("Company not found", company_id=str(company_id))
            return company

    async def get_companies(
        self, company_ids: list[CompanyId]
    ) -> dict[CompanyId, Company]:
        """Load several companies, keyed by ID."""
        if not company_ids:
            return {}
        companies = await self.company_repository.find_by_ids(list(set(company_ids)))
        return {company.id: company for company in companies}

    async def get_membership(
        self, company_id: CompanyId, user_id: UserId
    ) -> CompanyUser | None:
        """A user's membership of a company, if any."""
        return await self.membership_repository.find_company_user(company_id, user_id)

    async def is_verified_company_user(self, user_id: UserId) -> bool:
        """Check whether the user belongs to at least one verified company.

        Args:
            user_id: User ID

        Returns:
            True if any of the user's companies is verified
        """
        with logfire.span(
            "company_service.is_verified_company_user", user_id=str(user_id)
        ):
            memberships = await self.membership_repository.find_companies_for_user(
                user_id
            )
            companies = await self.get_companies([m.company_id for m in memberships])
            verified = any(c.is_verified for c in companies.values())
            logfire.info(
                "Company verification checked", user_id=str(user_id), verified=verified
            )
            return verified
