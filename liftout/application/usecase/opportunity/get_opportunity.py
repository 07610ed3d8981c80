"""Get opportunity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from liftout.application.usecase.view import OpportunityView
from liftout.domain.error import NotFoundError
from liftout.domain.service import CompanyService, OpportunityService
from liftout.domain.value import OpportunityId


class GetOpportunityRequest(BaseModel):
    """Get opportunity request."""

    opportunity_id: UUID


class GetOpportunityUseCase:
    """Show an opportunity with its company."""

    def __init__(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> None:
        self.opportunity_service = opportunity_service
        self.company_service = company_service

    async def execute(self, request: GetOpportunityRequest) -> OpportunityView:
        with logfire.span(
            "get_opportunity.execute", opportunity_id=str(request.opportunity_id)
        ):
            opportunity = await self.opportunity_service.get_opportunity(
                OpportunityId(request.opportunity_id)
            )
            if opportunity is None:
                raise NotFoundError("Opportunity", str(request.opportunity_id))
            company = await self.company_service.get_company(opportunity.company_id)
            return OpportunityView.from_opportunity(opportunity, company)
