"""Matching use cases."""

from liftout.application.usecase.matching.match_opportunities import (
    MatchOpportunitiesRequest,
    MatchOpportunitiesResponse,
    MatchOpportunitiesUseCase,
)
from liftout.application.usecase.matching.match_teams import (
    MatchTeamsRequest,
    MatchTeamsResponse,
    MatchTeamsUseCase,
)

__all__ = [
    "MatchOpportunitiesRequest",
    "MatchOpportunitiesResponse",
    "MatchOpportunitiesUseCase",
    "MatchTeamsRequest",
    "MatchTeamsResponse",
    "MatchTeamsUseCase",
]
