"""Opportunity use cases."""

from liftout.application.usecase.opportunity.close_opportunity import (
    CloseOpportunityRequest,
    CloseOpportunityResponse,
    CloseOpportunityUseCase,
)
from liftout.application.usecase.opportunity.create_opportunity import (
    CreateOpportunityRequest,
    CreateOpportunityUseCase,
)
from liftout.application.usecase.opportunity.get_opportunity import (
    GetOpportunityRequest,
    GetOpportunityUseCase,
)

__all__ = [
    "CloseOpportunityRequest",
    "CloseOpportunityResponse",
    "CloseOpportunityUseCase",
    "CreateOpportunityRequest",
    "CreateOpportunityUseCase",
    "GetOpportunityRequest",
    "GetOpportunityUseCase",
]
