"""User domain service."""

import logfire

from liftout.domain.error import NotFoundError
from liftout.domain.model import User
from liftout.domain.repository import UserRepository
from liftout.domain.value import EmailAddress, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_email(self, email: EmailAddress) -> User | None:
        """Find a registered user by email, if any."""
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def display_name(self, user_id: UserId, fallback: str) -> str:
        """Name to show for a user, or ``fallback`` when they no longer exist."""
        user = await self.user_repository.find_by_id(user_id)
        return user.display_name if user else fallback

    async def set_skills(self, user_id: UserId, skills: list[str]) -> list[str]:
        """Replace a user's skills.

        Blank entries are dropped and duplicates collapsed case-insensitively,
        keeping the first spelling.

        Args:
            user_id: User ID
            skills: New skill list

        Returns:
            The skills as stored

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.set_skills", user_id=str(user_id)):
            await self.get_by_id(user_id)
            unique: dict[str, str] = {}
            for skill in skills:
                if skill.strip():
                    unique.setdefault(skill.strip().lower(), skill.strip())
            await self.user_repository.set_skills(user_id, list(unique.values()))
            logfire.info("User skills updated", user_id=str(user_id), count=len(unique))
            return list(unique.values())
