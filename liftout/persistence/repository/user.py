"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from liftout.domain.model import User
from liftout.domain.repository import UserRepository
from liftout.domain.value import EmailAddress, UserId, UserType
from liftout.persistence.mappers import row_to_user, user_to_dict
from liftout.persistence.tables import user_skills_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        stmt = select(users_table).where(func.lower(users_table.c.email) == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def set_user_type(self, user_id: UserId, user_type: UserType) -> None:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(user_type=user_type.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_skills(self, user_id: UserId, skills: list[str]) -> None:
        """Replace a user's skills, dropping case-insensitive duplicates."""
        await self.session.execute(
            delete(user_skills_table).where(user_skills_table.c.user_id == user_id)
        )

        unique: dict[str, str] = {}
        for skill in skills:
            if skill.strip():
                unique.setdefault(skill.strip().lower(), skill.strip())
        if unique:
            await self.session.execute(
                insert(user_skills_table),
                [{"user_id": user_id, "skill": s} for s in unique.values()],
            )
        await self.session.flush()
