"""In-memory company repository for testing."""

from typing import Optional

from liftout.domain.model import Company
from liftout.domain.repository import CompanyRepository
from liftout.domain.value import CompanyId

from .store import InMemoryStore


class InMemoryCompanyRepository(CompanyRepository):
    """In-memory implementation of CompanyRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        return self._store.companies.get(company_id)

    async def find_by_ids(self, company_ids: list[CompanyId]) -> list[Company]:
        return [
            self._store.companies[cid]
            for cid in dict.fromkeys(company_ids)
            if cid in self._store.companies
        ]

    async def save(self, company: Company) -> Company:
        self._store.companies[company.id] = company
        return company
