"""In-memory opportunity repository for testing."""

from datetime import datetime
from typing import Optional

from liftout.domain.model import Opportunity
from liftout.domain.repository import OpportunityRepository
from liftout.domain.value import OpportunityId, OpportunityStatus

from .store import InMemoryStore


class InMemoryOpportunityRepository(OpportunityRepository):
    """In-memory implementation of OpportunityRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, opportunity_id: OpportunityId) -> Optional[Opportunity]:
        return self._store.opportunities.get(opportunity_id)

    async def save(self, opportunity: Opportunity) -> Opportunity:
        self._store.opportunities[opportunity.id] = opportunity
        return opportunity

    async def list_open(self, now: datetime, limit: int = 100) -> list[Opportunity]:
        found = [
            opp
            for opp in self._store.opportunities.values()
            if opp.status == OpportunityStatus.OPEN and not opp.is_expired(now)
        ]
        found.sort(key=lambda o: (o.featured, o.created_at), reverse=True)
        return found[:limit]

    async def update_status(
        self, opportunity_id: OpportunityId, status: OpportunityStatus
    ) -> Optional[Opportunity]:
        opportunity = self._store.opportunities.get(opportunity_id)
        if opportunity is None:
            return None
        updated = opportunity.model_copy(update={"status": status})
        self._store.opportunities[opportunity_id] = updated
        return updated
