"""Team use cases."""

from liftout.application.usecase.team.create_team import (
    CreateTeamRequest,
    CreateTeamUseCase,
)
from liftout.application.usecase.team.get_team import GetTeamRequest, GetTeamUseCase

__all__ = [
    "CreateTeamRequest",
    "CreateTeamUseCase",
    "GetTeamRequest",
    "GetTeamUseCase",
]
