"""Company repository interface."""

from abc import ABC, abstractmethod

from liftout.domain.model.company import Company
from liftout.domain.value import CompanyId


class CompanyRepository(ABC):
    """Repository for Company entity."""

    @abstractmethod
    async def find_by_id(self, company_id: CompanyId) -> Company | None:
        """Find a company by ID.

        Args:
            company_id: The company's unique identifier

        Returns:
            The company if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, company_ids: list[CompanyId]) -> list[Company]:
        """Find several companies at once.

        Args:
            company_ids: Company IDs, duplicates allowed

        Returns:
            The companies found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, company: Company) -> Company:
        """Save a company (create or update).

        Args:
            company: The company to save

        Returns:
            The saved company
        """
        pass
