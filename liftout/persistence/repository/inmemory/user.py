"""In-memory user repository for testing."""

from typing import Optional

from liftout.domain.model import User
from liftout.domain.repository import UserRepository
from liftout.domain.value import EmailAddress, UserId, UserType

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id)

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        self._store.users[user.id] = user
        return user

    async def set_user_type(self, user_id: UserId, user_type: UserType) -> None:
        user = self._store.users.get(user_id)
        if user:
            self._store.users[user_id] = user.model_copy(update={"user_type": user_type})

    async def set_skills(self, user_id: UserId, skills: list[str]) -> None:
        unique: dict[str, str] = {}
        for skill in skills:
            if skill.strip():
                unique.setdefault(skill.strip().lower(), skill.strip())
        self._store.user_skills[user_id] = list(unique.values())
