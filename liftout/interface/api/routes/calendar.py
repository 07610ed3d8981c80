"""Calendar routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import Field

from liftout.application.usecase.base import CamelModel
from liftout.application.usecase.calendar import (
    ScheduleMeetingRequest,
    ScheduleMeetingResponse,
    ScheduleMeetingUseCase,
)
from liftout.domain.service import JWTService
from liftout.interface.api.auth import require_principal

router = APIRouter(prefix="/api/calendar", tags=["calendar"], route_class=DishkaRoute)


class ScheduleMeetingAPIRequest(CamelModel):
    """API request for scheduling a meeting."""

    title: str = ""
    description: str | None = None
    starts_at: datetime | None = Field(default=None, alias="datetime")
    duration: int = 0
    attendees: list[str] = Field(default_factory=list)
    location: str | None = None
    meeting_link: str | None = None
    send_invites: bool = False


@router.post(
    "/schedule",
    response_model=ScheduleMeetingResponse,
    response_model_exclude_none=True,
)
async def schedule_meeting(
    request: ScheduleMeetingAPIRequest,
    schedule_use_case: FromDishka[ScheduleMeetingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ScheduleMeetingResponse:
    """Build an ICS invitation and optionally email it to attendees.

    Args:
        request: Meeting details
        schedule_use_case: Schedule meeting use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The meeting, its ICS content and per-attendee email results
    """
    principal = require_principal(jwt_service, auth_token, authorization)
    return await schedule_use_case.execute(
        ScheduleMeetingRequest(principal=principal, **request.model_dump())
    )
