"""Scoring primitives for team/opportunity matching.

Every function here is pure and returns an integer between 0 and 100.
Missing inputs score as neutral rather than failing.
"""

import math
from decimal import Decimal
from typing import Iterable

from liftout.domain.model.company import Company
from liftout.domain.value import (
    AvailabilityStatus,
    RemoteStatus,
    Urgency,
    VerificationStatus,
)

DEFAULT_SIZE_MIN = 1
DEFAULT_SIZE_MAX = 20

_AVAILABILITY_SCORES = {
    AvailabilityStatus.AVAILABLE: 100,
    AvailabilityStatus.SELECTIVE: 70,
    AvailabilityStatus.ENGAGED: 40,
}

_URGENCY_SCORES = {
    Urgency.CRITICAL: 100,
    Urgency.HIGH: 85,
    Urgency.STANDARD: 70,
    Urgency.LOW: 50,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (84.5 -> 85)."""
    return math.floor(value + 0.5)


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def _normalize(values: Iterable[str] | None) -> list[str]:
    if not values:
        return []
    return [v.strip().lower() for v in values if v and v.strip()]


def skills_score(
    team_skills: Iterable[str] | None,
    required_skills: Iterable[str] | None,
    neutral: int = 50,
) -> int:
    """Share of required skills the team covers.

    A required skill is covered when it and some team skill contain one
    another, ignoring case ("ML" covers "machine learning ml"; "python"
    covers "Python 3").

    Args:
        team_skills: Skills rolled up from the team's members
        required_skills: Skills the opportunity requires
        neutral: Score when nothing is required

    Returns:
        Percentage of required skills covered
    """
    required = _normalize(required_skills)
    if not required:
        return neutral

    team = _normalize(team_skills)
    matched = sum(
        1 for skill in required if any(t in skill or skill in t for t in team)
    )
    return clamp(round_half_up(matched / len(required) * 100))


def industry_score(team_industry: str | None, opportunity_industry: str | None) -> int:
    """Exact match 100, related (substring) 70, different 40, unknown 50."""
    team = (team_industry or "").strip().lower()
    opportunity = (opportunity_industry or "").strip().lower()

    if not team or not opportunity:
        return 50
    if team == opportunity:
        return 100
    if team in opportunity or opportunity in team:
        return 70
    return 40


def location_score(
    team_location: str | None,
    team_remote: RemoteStatus | None,
    opportunity_location: str | None,
    opportunity_remote: RemoteStatus | None,
) -> int:
    """Compatibility of where the team works and where the role is.

    Rules are checked in order, first match wins.
    """
    team = (team_location or "").strip().lower()
    opportunity = (opportunity_location or "").strip().lower()

    if team_remote == RemoteStatus.REMOTE and opportunity_remote == RemoteStatus.REMOTE:
        return 100
    if opportunity_remote == RemoteStatus.REMOTE:
        return 90
    if team and opportunity and team == opportunity:
        return 100
    if RemoteStatus.HYBRID in (team_remote, opportunity_remote):
        return 70
    if team_remote == RemoteStatus.REMOTE and opportunity_remote == RemoteStatus.ONSITE:
        return 30
    if team and opportunity:
        # Same country or region
        if team.split(",")[-1].strip() == opportunity.split(",")[-1].strip():
            return 70
    return 50


def size_score(
    team_size: int | None, size_min: int | None, size_max: int | None
) -> int:
    """Fit of the team's headcount to the wanted range.

    Each missing member costs 15 points, each extra member 10.
    """
    size = team_size or 0
    low = size_min or DEFAULT_SIZE_MIN
    high = size_max or DEFAULT_SIZE_MAX

    if low <= size <= high:
        return 100
    if size < low:
        return clamp(100 - (low - size) * 15)
    return clamp(100 - (size - high) * 10)


def _range(low: int | None, high: int | None) -> tuple[int, int]:
    low = low or 0
    high = high or 0
    # A single bound stands for both ends
    if not high:
        high = low
    if not low:
        low = high
    return low, high


def compensation_score(
    team_min: int | None,
    team_max: int | None,
    opportunity_min: int | None,
    opportunity_max: int | None,
) -> int:
    """Overlap between salary expectations and the offered budget.

    Overlapping ranges score 70 and up with the share of the team's range
    covered. Disjoint ranges lose points with the relative gap.
    """
    if not team_min and not team_max:
        return 70
    if not opportunity_min and not opportunity_max:
        return 70

    t_min, t_max = _range(team_min, team_max)
    o_min, o_max = _range(opportunity_min, opportunity_max)

    overlap_min = max(t_min, o_min)
    overlap_max = min(t_max, o_max)
    if overlap_max >= overlap_min:
        team_range = (t_max - t_min) or 1
        overlap = overlap_max - overlap_min
        return clamp(round_half_up(70 + overlap / team_range * 30))

    gap = t_min - o_max if t_min > o_max else o_min - t_max
    return clamp(round_half_up(70 - gap / max(t_min, o_min) * 100))


def experience_score(years_working_together: Decimal | float | None) -> int:
    """How long the team has worked together."""
    years = float(years_working_together or 0)
    if years >= 5:
        return 100
    if years >= 3:
        return 85
    if years >= 2:
        return 70
    if years >= 1:
        return 55
    return 40


def availability_score(status: AvailabilityStatus | None) -> int:
    return _AVAILABILITY_SCORES.get(status, 0)


def urgency_score(urgency: Urgency | None) -> int:
    return _URGENCY_SCORES.get(urgency, 70)


def company_quality_score(company: Company | None) -> int:
    """Completeness and verification of the company profile."""
    score = 50
    if company is None:
        return score

    if company.verification_status == VerificationStatus.VERIFIED:
        score += 30
    elif company.verification_status == VerificationStatus.PENDING:
        score += 10
    if company.logo_url:
        score += 10
    if company.industry:
        score += 10
    return clamp(score)
