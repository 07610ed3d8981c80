"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from liftout.domain.model import (
    Company,
    CompanyUser,
    Invitation,
    Opportunity,
    Team,
    TeamMember,
    User,
)
from liftout.domain.value import (
    CompanyId,
    InvitationId,
    OpportunityId,
    TeamId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Tables held as dicts keyed by id.

    One store backs every repository, so joins such as a team's skills
    rolled up from its members see writes made through any repository.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    user_skills: dict[UserId, list[str]] = field(default_factory=dict)
    companies: dict[CompanyId, Company] = field(default_factory=dict)
    company_users: list[CompanyUser] = field(default_factory=list)
    teams: dict[TeamId, Team] = field(default_factory=dict)
    team_members: list[TeamMember] = field(default_factory=list)
    opportunities: dict[OpportunityId, Opportunity] = field(default_factory=dict)
    invitations: dict[InvitationId, Invitation] = field(default_factory=dict)
