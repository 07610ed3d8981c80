"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict
from uuid import UUID

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
    AvailabilityStatus,
    CompanyId,
    CompanyRole,
    CompanyUserId,
    EmailAddress,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    OpportunityId,
    OpportunityStatus,
    RemoteStatus,
    TeamId,
    TeamMemberId,
    TeamVisibility,
    Urgency,
    UserId,
    UserType,
    VerificationStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=EmailAddress(root=row["email"]),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        user_type=UserType(row["user_type"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email.root,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "user_type": user.user_type.value,
        "created_at": user.created_at,
    }


def row_to_company(row: Dict[str, Any]) -> Company:
    """Convert database row to Company domain model."""
    return Company(
        id=CompanyId(_uuid(row["id"])),
        name=row["name"],
        industry=row.get("industry"),
        logo_url=row.get("logo_url"),
        verification_status=VerificationStatus(row["verification_status"]),
        created_at=row["created_at"],
    )


def company_to_dict(company: Company) -> Dict[str, Any]:
    data = company.model_dump()
    data["verification_status"] = company.verification_status.value
    return data


def row_to_company_user(row: Dict[str, Any]) -> CompanyUser:
    return CompanyUser(
        id=CompanyUserId(_uuid(row["id"])),
        company_id=CompanyId(_uuid(row["company_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=CompanyRole(row["role"]),
        joined_at=row["joined_at"],
    )


def company_user_to_dict(member: CompanyUser) -> Dict[str, Any]:
    data = member.model_dump()
    data["role"] = member.role.value
    return data


def row_to_team(
    row: Dict[str, Any], skills: list[str] | None = None, member_count: int = 0
) -> Team:
    """Convert database row to Team domain model.

    Args:
        row: Database row as dict
        skills: Skills rolled up from active members
        member_count: Number of active members

    Returns:
        Team domain model
    """
    return Team(
        id=TeamId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        industry=row.get("industry"),
        specialization=row.get("specialization"),
        location=row.get("location"),
        remote_status=RemoteStatus(row["remote_status"]),
        size=row.get("size"),
        years_working_together=row.get("years_working_together"),
        availability_status=AvailabilityStatus(row["availability_status"]),
        verification_status=VerificationStatus(row["verification_status"]),
        visibility=TeamVisibility(row["visibility"]),
        salary_expectation_min=row.get("salary_expectation_min"),
        salary_expectation_max=row.get("salary_expectation_max"),
        skills=skills or [],
        member_count=member_count,
        created_by=_optional_uuid(row.get("created_by")),
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Convert Team to a row dict, leaving out derived fields."""
    data = team.model_dump(exclude={"skills", "member_count"})
    for field in (
        "remote_status",
        "availability_status",
        "verification_status",
        "visibility",
    ):
        data[field] = getattr(team, field).value
    return data


def row_to_team_member(row: Dict[str, Any]) -> TeamMember:
    return TeamMember(
        id=TeamMemberId(_uuid(row["id"])),
        team_id=TeamId(_uuid(row["team_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=row["role"],
        is_admin=row["is_admin"],
        joined_at=row["joined_at"],
    )


def team_member_to_dict(member: TeamMember) -> Dict[str, Any]:
    data = member.model_dump()
    data["status"] = "active"
    return data


def row_to_opportunity(row: Dict[str, Any]) -> Opportunity:
    """Convert database row to Opportunity domain model."""
    remote_policy = row.get("remote_policy")
    return Opportunity(
        id=OpportunityId(_uuid(row["id"])),
        company_id=CompanyId(_uuid(row["company_id"])),
        title=row["title"],
        description=row.get("description"),
        industry=row.get("industry"),
        location=row.get("location"),
        remote_policy=RemoteStatus(remote_policy) if remote_policy else None,
        compensation_min=row.get("compensation_min"),
        compensation_max=row.get("compensation_max"),
        compensation_currency=row.get("compensation_currency") or "USD",
        team_size_min=row.get("team_size_min"),
        team_size_max=row.get("team_size_max"),
        required_skills=list(row.get("required_skills") or []),
        preferred_skills=list(row.get("preferred_skills") or []),
        urgency=Urgency(row["urgency"]),
        status=OpportunityStatus(row["status"]),
        featured=row["featured"],
        application_count=row["application_count"],
        expires_at=row.get("expires_at"),
        created_by=_optional_uuid(row.get("created_by")),
        created_at=row["created_at"],
    )


def opportunity_to_dict(opportunity: Opportunity) -> Dict[str, Any]:
    data = opportunity.model_dump()
    data["remote_policy"] = (
        opportunity.remote_policy.value if opportunity.remote_policy else None
    )
    data["urgency"] = opportunity.urgency.value
    data["status"] = opportunity.status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    email = row.get("invitee_email")
    token = row.get("invite_token")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        kind=InvitationKind(row["kind"]),
        target_id=_uuid(row["target_id"]),
        role=row["role"],
        invitee_email=EmailAddress(root=email) if email else None,
        invitee_user_id=_optional_uuid(row.get("invitee_user_id")),
        invited_by=UserId(_uuid(row["invited_by"])),
        message=row.get("message"),
        token=InvitationToken(root=token) if token else None,
        status=InvitationStatus(row["status"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
        accepted_by_user_id=_optional_uuid(row.get("accepted_by_user_id")),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    return {
        "id": invitation.id,
        "kind": invitation.kind.value,
        "target_id": invitation.target_id,
        "role": invitation.role,
        "invitee_email": (
            invitation.invitee_email.root if invitation.invitee_email else None
        ),
        "invitee_user_id": invitation.invitee_user_id,
        "invited_by": invitation.invited_by,
        "message": invitation.message,
        "invite_token": invitation.token.root if invitation.token else None,
        "status": invitation.status.value,
        "expires_at": invitation.expires_at,
        "created_at": invitation.created_at,
        "responded_at": invitation.responded_at,
        "accepted_by_user_id": invitation.accepted_by_user_id,
    }
