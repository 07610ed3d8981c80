"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.user import (
    UpdateSkillsRequest,
    UpdateSkillsResponse,
    UpdateSkillsUseCase,
)
from liftout.domain.service import JWTService
from liftout.interface.api.auth import require_principal

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class UpdateSkillsAPIRequest(CamelModel):
    skills: list[str]


@router.put("/me/skills", response_model=UpdateSkillsResponse)
async def update_my_skills(
    request: UpdateSkillsAPIRequest,
    update_skills_use_case: FromDishka[UpdateSkillsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateSkillsResponse:
    """Replace the caller's skills."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await update_skills_use_case.execute(
        UpdateSkillsRequest(principal=principal, skills=request.skills)
    )
