"""PostgreSQL implementation of Company repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from liftout.domain.model import Company
from liftout.domain.repository import CompanyRepository
from liftout.domain.value import CompanyId
from liftout.persistence.mappers import company_to_dict, row_to_company
from liftout.persistence.tables import companies_table


class PostgresCompanyRepository(CompanyRepository):
    """PostgreSQL implementation of CompanyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        stmt = select(companies_table).where(companies_table.c.id == company_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_company(dict(row)) if row else None

    async def find_by_ids(self, company_ids: list[CompanyId]) -> list[Company]:
        if not company_ids:
            return []
        stmt = select(companies_table).where(
            companies_table.c.id.in_(set(company_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_company(dict(row)) for row in result.mappings().all()]

    async def save(self, company: Company) -> Company:
        company_dict = company_to_dict(company)

        existing = await self.find_by_id(company.id)
        if existing:
            stmt = (
                update(companies_table)
                .where(companies_table.c.id == company.id)
                .values(**company_dict)
            )
        else:
            stmt = insert(companies_table).values(**company_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return company
