"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from liftout.config import Settings
from liftout.domain.repository import (
    CompanyRepository,
    InvitationRepository,
    MembershipRepository,
    OpportunityRepository,
    TeamRepository,
    UserRepository,
)
from liftout.persistence.database import create_engine, create_session_factory
from liftout.persistence.repository import (
    PostgresCompanyRepository,
    PostgresInvitationRepository,
    PostgresMembershipRepository,
    PostgresOpportunityRepository,
    PostgresTeamRepository,
    PostgresUserRepository,
)
from liftout.persistence.repository.inmemory import (
    InMemoryCompanyRepository,
    InMemoryInvitationRepository,
    InMemoryMembershipRepository,
    InMemoryOpportunityRepository,
    InMemoryStore,
    InMemoryTeamRepository,
    InMemoryUserRepository,
)
from liftout.util.di.base import ProviderBase
from liftout.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over PostgreSQL, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide a session for the request.

        Commits when the request finishes cleanly and rolls back if the
        handler raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_team_repository(self, session: AsyncSession) -> TeamRepository:
        return PostgresTeamRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, session: AsyncSession) -> CompanyRepository:
        return PostgresCompanyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_membership_repository(self, session: AsyncSession) -> MembershipRepository:
        return PostgresMembershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_opportunity_repository(
        self, session: AsyncSession
    ) -> OpportunityRepository:
        return PostgresOpportunityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        return PostgresInvitationRepository(session)


class InMemoryPersistenceProvider(PersistenceProvider):
    """Repositories over a process-wide in-memory store.

    Used by tests and by ``DATA_SOURCE=memory`` runs. The store lives for
    the container's lifetime; each container starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_team_repository(self, store: InMemoryStore) -> TeamRepository:
        return InMemoryTeamRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, store: InMemoryStore) -> CompanyRepository:
        return InMemoryCompanyRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_membership_repository(self, store: InMemoryStore) -> MembershipRepository:
        return InMemoryMembershipRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_opportunity_repository(
        self, store: InMemoryStore
    ) -> OpportunityRepository:
        return InMemoryOpportunityRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, store: InMemoryStore) -> InvitationRepository:
        return InMemoryInvitationRepository(store)
