"""Membership repository interface."""

from abc import ABC, abstractmethod

from liftout.domain.model.company import CompanyUser
from liftout.domain.model.team import TeamMember
from liftout.domain.value import CompanyId, TeamId, UserId


class MembershipRepository(ABC):
    """Repository for active team and company memberships.

    A user holds at most one membership per team and per company; adding
    one that already exists replaces its role and keeps the row.
    """

    @abstractmethod
    async def find_team_member(
        self, team_id: TeamId, user_id: UserId
    ) -> TeamMember | None:
        """Find a user's membership of a team.

        Args:
            team_id: The team
            user_id: The user

        Returns:
            The membership if the user is an active member, None otherwise
        """
        pass

    @abstractmethod
    async def add_team_member(self, member: TeamMember) -> TeamMember:
        """Activate a team membership.

        Args:
            member: The membership to store

        Returns:
            The stored membership
        """
        pass

    @abstractmethod
    async def find_company_user(
        self, company_id: CompanyId, user_id: UserId
    ) -> CompanyUser | None:
        """Find a user's membership of a company.

        Args:
            company_id: The company
            user_id: The user

        Returns:
            The membership if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_companies_for_user(self, user_id: UserId) -> list[CompanyUser]:
        """List every company membership a user holds.

        Args:
            user_id: The user

        Returns:
            Memberships, oldest first
        """
        pass

    @abstractmethod
    async def add_company_user(self, member: CompanyUser) -> CompanyUser:
        """Activate a company membership.

        Args:
            member: The membership to store

        Returns:
            The stored membership
        """
        pass
