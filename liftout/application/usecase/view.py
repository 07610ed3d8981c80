"""Read models shared by several use cases."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from liftout.application.usecase.base import CamelModel
from liftout.domain.model import Company, MatchScore, Opportunity, Team
from liftout.domain.value import (
    AvailabilityStatus,
    OpportunityStatus,
    Recommendation,
    RemoteStatus,
    TeamVisibility,
    Urgency,
    VerificationStatus,
)

ANONYMOUS_DESCRIPTION = (
    "Team details hidden in anonymous mode. Express interest to learn more."
)


class TeamView(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    industry: str | None = None
    specialization: str | None = None
    location: str | None = None
    remote_status: RemoteStatus
    size: int
    member_count: int
    years_working_together: Decimal | None = None
    availability_status: AvailabilityStatus
    verification_status: VerificationStatus
    visibility: TeamVisibility
    salary_expectation_min: int | None = None
    salary_expectation_max: int | None = None
    skills: list[str]
    is_anonymous: bool = False
    created_at: datetime

    @classmethod
    def from_team(cls, team: Team, mask_anonymous: bool = True) -> "TeamView":
        """Build the public view of a team.

        Anonymous teams keep their matchable attributes but lose anything
        that identifies them.
        """
        view = cls(
            id=team.id,
            name=team.name,
            description=team.description,
            industry=team.industry,
            specialization=team.specialization,
            location=team.location,
            remote_status=team.remote_status,
            size=team.effective_size,
            member_count=team.member_count,
            years_working_together=team.years_working_together,
            availability_status=team.availability_status,
            verification_status=team.verification_status,
            visibility=team.visibility,
            salary_expectation_min=team.salary_expectation_min,
            salary_expectation_max=team.salary_expectation_max,
            skills=team.skills,
            created_at=team.created_at,
        )
        if mask_anonymous and team.visibility == TeamVisibility.ANONYMOUS:
            view = view.model_copy(
                update={
                    "name": f"Anonymous Team #{str(team.id)[-6:].upper()}",
                    "description": ANONYMOUS_DESCRIPTION,
                    "location": "Location withheld" if team.location else None,
                    "is_anonymous": True,
                }
            )
        return view


class CompanySummary(CamelModel):
    id: UUID
    name: str
    industry: str | None = None
    logo_url: str | None = None
    verified: bool

    @classmethod
    def from_company(cls, company: Company) -> "CompanySummary":
        return cls(
            id=company.id,
            name=company.name,
            industry=company.industry,
            logo_url=company.logo_url,
            verified=company.is_verified,
        )


class OpportunityView(CamelModel):
    id: UUID
    company_id: UUID
    title: str
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    remote_policy: RemoteStatus | None = None
    compensation_min: int | None = None
    compensation_max: int | None = None
    compensation_currency: str
    team_size_min: int | None = None
    team_size_max: int | None = None
    required_skills: list[str]
    preferred_skills: list[str]
    urgency: Urgency
    status: OpportunityStatus
    featured: bool
    expires_at: datetime | None = None
    created_at: datetime
    company: CompanySummary | None = None

    @classmethod
    def from_opportunity(
        cls, opportunity: Opportunity, company: Company | None = None
    ) -> "OpportunityView":
        data = opportunity.model_dump(
            exclude={"application_count", "created_by"}
        )
        return cls(
            **data,
            company=CompanySummary.from_company(company) if company else None,
        )


class ScoreView(CamelModel):
    total: int
    breakdown: dict[str, int]
    recommendation: Recommendation
    strengths: list[str]
    concerns: list[str]

    @classmethod
    def from_score(cls, score: MatchScore) -> "ScoreView":
        return cls(**score.model_dump())
