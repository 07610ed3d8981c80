"""Calendar use cases."""

from liftout.application.usecase.calendar.schedule_meeting import (
    ScheduleMeetingRequest,
    ScheduleMeetingResponse,
    ScheduleMeetingUseCase,
)

__all__ = [
    "ScheduleMeetingRequest",
    "ScheduleMeetingResponse",
    "ScheduleMeetingUseCase",
]
