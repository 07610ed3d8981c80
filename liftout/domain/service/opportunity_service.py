"""Opportunity domain service."""

from datetime import datetime

import logfire

from liftout.domain.error import NotFoundError, ValidationError
from liftout.domain.model import Opportunity
from liftout.domain.repository import OpportunityRepository
from liftout.domain.value import OpportunityId, OpportunityStatus

from .base import Service


class OpportunityService(Service):
    """Domain service for opportunity operations."""

    def __init__(self, opportunity_repository: OpportunityRepository) -> None:
        """Initialize opportunity service.

        Args:
            opportunity_repository: Opportunity repository
        """
        self.opportunity_repository = opportunity_repository

    async def create_opportunity(self, opportunity: Opportunity) -> Opportunity:
        """Store a new opportunity.

        Args:
            opportunity: Opportunity to create

        Returns:
            The stored opportunity

        Raises:
            ValidationError: If the compensation or team size range is inverted
        """
        with logfire.span(
            "opportunity_service.create_opportunity",
            opportunity_id=str(opportunity.id),
            company_id=str(opportunity.company_id),
        ):
            _check_range(
                opportunity.compensation_min, opportunity.compensation_max, "compensation"
            )
            _check_range(
                opportunity.team_size_min, opportunity.team_size_max, "team size"
            )
            saved = await self.opportunity_repository.save(opportunity)
            logfire.info(
                "Opportunity created", opportunity_id=str(saved.id), title=saved.title
            )
            return saved

    async def get_opportunity(self, opportunity_id: OpportunityId) -> Opportunity | None:
        """Get an opportunity by ID.

        Args:
            opportunity_id: Opportunity ID

        Returns:
            Opportunity if found, None otherwise
        """
        with logfire.span(
            "opportunity_service.get_opportunity", opportunity_id=str(opportunity_id)
        ):
            opportunity = await self.opportunity_repository.find_by_id(opportunity_id)
            if opportunity is None:
                logfire.warn("Opportunity not found", opportunity_id=str(opportunity_id))
            return opportunity

    async def list_open(self, now: datetime, limit: int) -> list[Opportunity]:
        """Open, unexpired opportunities a team may be matched with."""
        with logfire.span("opportunity_service.list_open"):
            opportunities = await self.opportunity_repository.list_open(now, limit)
            logfire.info("Open opportunities loaded", count=len(opportunities))
            return opportunities

    async def close_opportunity(
        self, opportunity: Opportunity, status: OpportunityStatus
    ) -> tuple[Opportunity, bool]:
        """Move an open opportunity to filled or closed.

        Closing an opportunity that is no longer open is a no-op.

        Args:
            opportunity: The opportunity to close
            status: Target status, filled or closed

        Returns:
            The opportunity and whether its status changed

        Raises:
            ValidationError: If the target status is not terminal
            NotFoundError: If the opportunity vanished meanwhile
        """
        if status == OpportunityStatus.OPEN:
            raise ValidationError("Status must be filled or closed")

        with logfire.span(
            "opportunity_service.close_opportunity",
            opportunity_id=str(opportunity.id),
            status=status.value,
        ):
            if opportunity.status != OpportunityStatus.OPEN:
                logfire.info(
                    "Opportunity already closed",
                    opportunity_id=str(opportunity.id),
                    status=opportunity.status.value,
                )
                return opportunity, False

            updated = await self.opportunity_repository.update_status(
                opportunity.id, status
            )
            if updated is None:
                raise NotFoundError("Opportunity", str(opportunity.id))

            logfire.info(
                "Opportunity closed",
                opportunity_id=str(opportunity.id),
                status=status.value,
            )
            return updated, True


def _check_range(low: int | None, high: int | None, label: str) -> None:
    if low is not None and high is not None and low > high:
        raise ValidationError(f"Minimum {label} cannot exceed maximum {label}")
