"""User repository interface."""

from abc import ABC, abstractmethod

from liftout.domain.model.user import User
from liftout.domain.value import EmailAddress, UserId, UserType


class UserRepository(ABC):
    """Repository for User entity.

    Accounts are owned by the sign-in service; this service reads them,
    records their skills and changes their type.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> User | None:
        """Find a user by email address (case-insensitive).

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def set_user_type(self, user_id: UserId, user_type: UserType) -> None:
        """Change the account type of a user.

        Args:
            user_id: The user to update
            user_type: New account type
        """
        pass

    @abstractmethod
    async def set_skills(self, user_id: UserId, skills: list[str]) -> None:
        """Replace the skills recorded for a user.

        Args:
            user_id: The user to update
            skills: Skill names
        """
        pass
