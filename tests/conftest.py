"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from liftout.domain.model import Company, CompanyUser, Opportunity, Team, User
from liftout.domain.model.common import utcnow
from liftout.domain.value import (
    AvailabilityStatus,
    CompanyId,
    CompanyRole,
    CompanyUserId,
    EmailAddress,
    OpportunityId,
    RemoteStatus,
    TeamId,
    UserId,
    UserType,
    VerificationStatus,
)

logfire.configure(send_to_logfire=False, console=False)


def make_user(email: str = "alice@example.com", **overrides) -> User:
    """Build a user with sensible defaults."""
    values = {
        "id": UserId(uuid4()),
        "email": EmailAddress(root=email),
        "first_name": "Alice",
        "last_name": "Smith",
        "user_type": UserType.INDIVIDUAL,
    }
    values.update(overrides)
    return User(**values)


def make_company(name: str = "Acme Corp", **overrides) -> Company:
    """Build a verified company."""
    values = {
        "id": CompanyId(uuid4()),
        "name": name,
        "industry": "Technology",
        "verification_status": VerificationStatus.VERIFIED,
    }
    values.update(overrides)
    return Company(**values)


def make_team(name: str = "Platform Team", **overrides) -> Team:
    """Build a public, available team of four."""
    values = {
        "id": TeamId(uuid4()),
        "name": name,
        "industry": "Technology",
        "location": "London",
        "remote_status": RemoteStatus.HYBRID,
        "size": 4,
        "years_working_together": 3,
        "availability_status": AvailabilityStatus.AVAILABLE,
        "salary_expectation_min": 100_000,
        "salary_expectation_max": 150_000,
    }
    values.update(overrides)
    return Team(**values)


def make_opportunity(
    company_id: CompanyId, title: str = "Data Platform Team", **overrides
) -> Opportunity:
    """Build an open opportunity for a company."""
    values = {
        "id": OpportunityId(uuid4()),
        "company_id": company_id,
        "title": title,
        "industry": "Technology",
        "location": "London",
        "remote_policy": RemoteStatus.HYBRID,
        "compensation_min": 110_000,
        "compensation_max": 160_000,
        "team_size_min": 3,
        "team_size_max": 6,
        "required_skills": ["Python", "PostgreSQL"],
        "preferred_skills": ["Kubernetes"],
    }
    values.update(overrides)
    return Opportunity(**values)


def days_from_now(days: float) -> datetime:
    """Timestamp relative to the current time."""
    return utcnow() + timedelta(days=days)


def make_company_user(
    company: Company, user: User, role: CompanyRole = CompanyRole.OWNER
) -> CompanyUser:
    """Membership of a user in a company."""
    return CompanyUser(
        id=CompanyUserId(uuid4()), company_id=company.id, user_id=user.id, role=role
    )
