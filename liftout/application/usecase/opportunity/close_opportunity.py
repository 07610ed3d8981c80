"""Close opportunity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from liftout.domain.service import CompanyService, OpportunityService
from liftout.domain.value import OpportunityId, OpportunityStatus


class CloseOpportunityRequest(BaseModel):
    """Close opportunity request."""

    principal: Principal
    opportunity_id: UUID
    status: str = OpportunityStatus.FILLED.value


class CloseOpportunityResponse(CamelModel):
    """Close opportunity response."""

    success: bool = True
    message: str
    status: OpportunityStatus


class CloseOpportunityUseCase:
    """Mark an opportunity as filled or closed."""

    def __init__(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> None:
        """Initialize close opportunity use case.

        Args:
            opportunity_service: Opportunity domain service
            company_service: Company domain service
        """
        self.opportunity_service = opportunity_service
        self.company_service = company_service

    async def execute(self, request: CloseOpportunityRequest) -> CloseOpportunityResponse:
        """Close the opportunity.

        Closing one that is already filled or closed succeeds without
        changing it.

        Args:
            request: Opportunity and target status

        Returns:
            Outcome message and the resulting status

        Raises:
            ValidationError: If the status is not filled or closed
            NotFoundError: If the opportunity does not exist
            NotAuthorizedError: If the caller is not in the owning company
        """
        if request.status not in (
            OpportunityStatus.FILLED.value,
            OpportunityStatus.CLOSED.value,
        ):
            raise ValidationError("Status must be filled or closed")

        with logfire.span(
            "close_opportunity.execute",
            opportunity_id=str(request.opportunity_id),
            user_id=str(request.principal.user_id),
        ):
            opportunity = await self.opportunity_service.get_opportunity(
                OpportunityId(request.opportunity_id)
            )
            if opportunity is None:
                raise NotFoundError("Opportunity", str(request.opportunity_id))

            membership = await self.company_service.get_membership(
                opportunity.company_id, request.principal.user_id
            )
            if membership is None:
                raise NotAuthorizedError("Not authorized to manage this opportunity")

            updated, changed = await self.opportunity_service.close_opportunity(
                opportunity, OpportunityStatus(request.status)
            )
            if not changed:
                return CloseOpportunityResponse(
                    message="Opportunity is already closed", status=updated.status
                )
            return CloseOpportunityResponse(
                message=f'"{updated.title}" has been closed', status=updated.status
            )
