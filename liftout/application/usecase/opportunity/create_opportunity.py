"""Create opportunity use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel, Field

from liftout.application.usecase.base import Principal
from liftout.application.usecase.view import OpportunityView
from liftout.domain.error import NotAuthorizedError, NotFoundError
from liftout.domain.model import Opportunity
from liftout.domain.service import CompanyService, OpportunityService
from liftout.domain.value import CompanyId, OpportunityId, RemoteStatus, Urgency


class CreateOpportunityRequest(BaseModel):
    """Create opportunity request."""

    principal: Principal
    company_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    remote_policy: RemoteStatus | None = None
    compensation_min: int | None = Field(default=None, ge=0)
    compensation_max: int | None = Field(default=None, ge=0)
    compensation_currency: str = Field(default="USD", min_length=3, max_length=3)
    team_size_min: int | None = Field(default=None, ge=1)
    team_size_max: int | None = Field(default=None, ge=1)
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    urgency: Urgency = Urgency.STANDARD
    expires_at: datetime | None = None


class CreateOpportunityUseCase:
    """Post an opportunity on behalf of one of the caller's companies."""

    def __init__(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> None:
        """Initialize create opportunity use case.

        Args:
            opportunity_service: Opportunity domain service
            company_service: Company domain service
        """
        self.opportunity_service = opportunity_service
        self.company_service = company_service

    async def execute(self, request: CreateOpportunityRequest) -> OpportunityView:
        """Create the opportunity.

        Args:
            request: Opportunity attributes

        Returns:
            The created opportunity

        Raises:
            NotAuthorizedError: If the caller does not belong to the company
            NotFoundError: If the company does not exist
            ValidationError: If a range is inverted
        """
        company_id = CompanyId(request.company_id)
        with logfire.span(
            "create_opportunity.execute",
            company_id=str(company_id),
            user_id=str(request.principal.user_id),
        ):
            membership = await self.company_service.get_membership(
                company_id, request.principal.user_id
            )
            if membership is None:
                raise NotAuthorizedError(
                    "Only members of this company can post opportunities"
                )
            company = await self.company_service.get_company(company_id)
            if company is None:
                raise NotFoundError("Company", str(company_id))

            opportunity = Opportunity(
                id=OpportunityId(uuid4()),
                created_by=request.principal.user_id,
                **request.model_dump(exclude={"principal"}),
            )
            created = await self.opportunity_service.create_opportunity(opportunity)
            return OpportunityView.from_opportunity(created, company)
