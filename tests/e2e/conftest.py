"""Fixtures for end-to-end API tests.

Each test gets its own app over a fresh container, so the in-memory store
starts empty. Data is seeded through the repositories in that container.
"""

from dataclasses import dataclass
from uuid import uuid4

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from liftout.adapter.email import MockEmailClient
from liftout.config import Settings
from liftout.domain.model import (
    Company,
    CompanyUser,
    Opportunity,
    Team,
    TeamMember,
    User,
)
from liftout.domain.repository import (
    CompanyRepository,
    MembershipRepository,
    OpportunityRepository,
    TeamRepository,
    UserRepository,
)
from liftout.domain.service import EmailClient, JWTService
from liftout.domain.value import TeamMemberId
from liftout.interface.api.app import create_app
from tests.di import build_test_container, make_test_settings


@dataclass
class ApiEnv:
    client: httpx.AsyncClient
    container: AsyncContainer
    settings: Settings

    def auth(self, user: User) -> dict[str, str]:
        """Bearer header for a user."""
        token = JWTService(self.settings.auth).create_token(
            str(user.id), user.email.root, user.user_type.value
        )
        return {"Authorization": f"Bearer {token}"}

    async def emails(self) -> MockEmailClient:
        return await self.container.get(EmailClient)

    async def add_user(self, user: User, skills: list[str] | None = None) -> User:
        async with self.container() as request:
            users = await request.get(UserRepository)
            await users.save(user)
            if skills:
                await users.set_skills(user.id, skills)
        return user

    async def add_company(self, company: Company, *members: CompanyUser) -> Company:
        async with self.container() as request:
            await (await request.get(CompanyRepository)).save(company)
            memberships = await request.get(MembershipRepository)
            for member in members:
                await memberships.add_company_user(member)
        return company

    async def add_team(self, team: Team) -> Team:
        async with self.container() as request:
            return await (await request.get(TeamRepository)).save(team)

    async def add_member(self, team: Team, user: User, is_admin: bool = False) -> None:
        async with self.container() as request:
            await (await request.get(MembershipRepository)).add_team_member(
                TeamMember(
                    id=TeamMemberId(uuid4()),
                    team_id=team.id,
                    user_id=user.id,
                    role="admin" if is_admin else "member",
                    is_admin=is_admin,
                )
            )

    async def add_opportunity(self, opportunity: Opportunity) -> Opportunity:
        async with self.container() as request:
            return await (await request.get(OpportunityRepository)).save(opportunity)

    async def get(self, dependency_type):
        """Resolve a request-scoped dependency outside of a request."""
        async with self.container() as request:
            return await request.get(dependency_type)


@pytest_asyncio.fixture
async def api():
    settings = make_test_settings()
    container = build_test_container(settings=settings)
    app = create_app(container=container, settings=settings)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield ApiEnv(client=client, container=container, settings=settings)
    await container.close()
