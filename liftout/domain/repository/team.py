"""Team repository interface."""

from abc import ABC, abstractmethod

from liftout.domain.model.team import Team
from liftout.domain.value import TeamId


class TeamRepository(ABC):
    """Repository for Team entity.

    Loaded teams carry ``skills`` and ``member_count`` rolled up from their
    active members.
    """

    @abstractmethod
    async def find_by_id(self, team_id: TeamId) -> Team | None:
        """Find a team by ID.

        Soft-deleted teams are not returned.

        Args:
            team_id: The team's unique identifier

        Returns:
            The team if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, team: Team) -> Team:
        """Save a team (create or update).

        ``skills`` and ``member_count`` are derived and never written.

        Args:
            team: The team to save

        Returns:
            The saved team, reloaded with derived fields
        """
        pass

    @abstractmethod
    async def list_discoverable(
        self, include_anonymous: bool = False, limit: int = 100
    ) -> list[Team]:
        """List teams that companies may discover.

        Discoverable teams are not deleted, not ``not_available``, and
        public (plus anonymous when ``include_anonymous`` is set).

        Args:
            include_anonymous: Whether anonymous teams are included
            limit: Maximum number of teams

        Returns:
            Teams, most recently created first
        """
        pass
