"""Match score value.

Match scores are never persisted; they are recomputed on every request
from a team and an opportunity.
"""

from pydantic import Field

from liftout.domain.model.common import DomainModel
from liftout.domain.value import Recommendation


class MatchScore(DomainModel):
    """Compatibility between a team and an opportunity."""

    total: int = Field(ge=0, le=100)
    breakdown: dict[str, int]
    recommendation: Recommendation
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
