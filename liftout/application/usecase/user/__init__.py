"""User use cases."""

from liftout.application.usecase.user.update_skills import (
    UpdateSkillsRequest,
    UpdateSkillsResponse,
    UpdateSkillsUseCase,
)

__all__ = [
    "UpdateSkillsRequest",
    "UpdateSkillsResponse",
    "UpdateSkillsUseCase",
]
