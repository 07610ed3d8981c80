"""In-memory membership repository for testing."""

from typing import Optional

from liftout.domain.model import CompanyUser, TeamMember
from liftout.domain.repository import MembershipRepository
from liftout.domain.value import CompanyId, TeamId, UserId

from .store import InMemoryStore


class InMemoryMembershipRepository(MembershipRepository):
    """In-memory implementation of MembershipRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_team_member(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamMember]:
        for member in self._store.team_members:
            if member.team_id == team_id and member.user_id == user_id:
                return member
        return None

    async def add_team_member(self, member: TeamMember) -> TeamMember:
        members = self._store.team_members
        for i, existing in enumerate(members):
            if existing.team_id == member.team_id and existing.user_id == member.user_id:
                members[i] = existing.model_copy(
                    update={
                        "role": member.role,
                        "is_admin": member.is_admin,
                        "joined_at": member.joined_at,
                    }
                )
                return members[i]
        members.append(member)
        return member

    async def find_company_user(
        self, company_id: CompanyId, user_id: UserId
    ) -> Optional[CompanyUser]:
        for member in self._store.company_users:
            if member.company_id == company_id and member.user_id == user_id:
                return member
        return None

    async def find_companies_for_user(self, user_id: UserId) -> list[CompanyUser]:
        members = [m for m in self._store.company_users if m.user_id == user_id]
        return sorted(members, key=lambda m: m.joined_at)

    async def add_company_user(self, member: CompanyUser) -> CompanyUser:
        members = self._store.company_users
        for i, existing in enumerate(members):
            if (
                existing.company_id == member.company_id
                and existing.user_id == member.user_id
            ):
                members[i] = existing.model_copy(
                    update={"role": member.role, "joined_at": member.joined_at}
                )
                return members[i]
        members.append(member)
        return member
