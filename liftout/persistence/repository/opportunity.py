"""PostgreSQL implementation of Opportunity repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from liftout.domain.model import Opportunity
from liftout.domain.repository import OpportunityRepository
from liftout.domain.value import OpportunityId, OpportunityStatus
from liftout.persistence.mappers import opportunity_to_dict, row_to_opportunity
from liftout.persistence.tables import opportunities_table


class PostgresOpportunityRepository(OpportunityRepository):
    """PostgreSQL implementation of OpportunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, opportunity_id: OpportunityId) -> Optional[Opportunity]:
        stmt = select(opportunities_table).where(
            opportunities_table.c.id == opportunity_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_opportunity(dict(row)) if row else None

    async def save(self, opportunity: Opportunity) -> Opportunity:
        """Save an opportunity (create or update).

        Args:
            opportunity: Opportunity to save

        Returns:
            Saved opportunity
        """
        opportunity_dict = opportunity_to_dict(opportunity)

        existing = await self.find_by_id(opportunity.id)
        if existing:
            stmt = (
                update(opportunities_table)
                .where(opportunities_table.c.id == opportunity.id)
                .values(**opportunity_dict)
            )
        else:
            stmt = insert(opportunities_table).values(**opportunity_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return opportunity

    async def list_open(self, now: datetime, limit: int = 100) -> list[Opportunity]:
        stmt = (
            select(opportunities_table)
            .where(
                and_(
                    opportunities_table.c.status == OpportunityStatus.OPEN.value,
                    or_(
                        opportunities_table.c.expires_at.is_(None),
                        opportunities_table.c.expires_at > now,
                    ),
                )
            )
            .order_by(
                opportunities_table.c.featured.desc(),
                opportunities_table.c.created_at.desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_opportunity(dict(row)) for row in result.mappings().all()]

    async def update_status(
        self, opportunity_id: OpportunityId, status: OpportunityStatus
    ) -> Optional[Opportunity]:
        stmt = (
            update(opportunities_table)
            .where(opportunities_table.c.id == opportunity_id)
            .values(status=status.value)
            .returning(opportunities_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_opportunity(dict(row)) if row else None
