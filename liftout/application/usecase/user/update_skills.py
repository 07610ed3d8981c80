"""Update the caller's skills use case."""

import logfire
from pydantic import BaseModel

from liftout.application.usecase.base import CamelModel, Principal
from liftout.domain.service import UserService


class UpdateSkillsRequest(BaseModel):
    """Update skills request."""

    principal: Principal
    skills: list[str]


class UpdateSkillsResponse(CamelModel):
    """Update skills response."""

    skills: list[str]


class UpdateSkillsUseCase:
    """Replace the caller's skills, which feed their teams' skill roll-up."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateSkillsRequest) -> UpdateSkillsResponse:
        with logfire.span(
            "update_skills.execute", user_id=str(request.principal.user_id)
        ):
            skills = await self.user_service.set_skills(
                request.principal.user_id, request.skills
            )
            return UpdateSkillsResponse(skills=skills)
