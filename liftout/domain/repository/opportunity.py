"""Opportunity repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from liftout.domain.model.opportunity import Opportunity
from liftout.domain.value import OpportunityId, OpportunityStatus


class OpportunityRepository(ABC):
    """Repository for Opportunity entity."""

    @abstractmethod
    async def find_by_id(self, opportunity_id: OpportunityId) -> Opportunity | None:
        """Find an opportunity by ID.

        Args:
            opportunity_id: The opportunity's unique identifier

        Returns:
            The opportunity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, opportunity: Opportunity) -> Opportunity:
        """Save an opportunity (create or update).

        Args:
            opportunity: The opportunity to save

        Returns:
            The saved opportunity
        """
        pass

    @abstractmethod
    async def list_open(self, now: datetime, limit: int = 100) -> list[Opportunity]:
        """List open opportunities that have not expired.

        Args:
            now: Reference time for expiry
            limit: Maximum number of opportunities

        Returns:
            Featured opportunities first, then most recent
        """
        pass

    @abstractmethod
    async def update_status(
        self, opportunity_id: OpportunityId, status: OpportunityStatus
    ) -> Opportunity | None:
        """Set the status of an opportunity.

        Args:
            opportunity_id: The opportunity to update
            status: New status

        Returns:
            The updated opportunity, or None if it does not exist
        """
        pass
