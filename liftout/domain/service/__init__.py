"""Domain services."""

from .base import Service
from .calendar_service import CalendarService
from .company_service import CompanyService
from .invitation_service import InvitationService, TokenFactory
from .jwt_service import JWTService
from .matching_service import MatchingService
from .notification_service import (
    EmailAttachment,
    EmailClient,
    EmailResult,
    NotificationService,
    RecipientResult,
)
from .opportunity_service import OpportunityService
from .team_service import TeamService
from .user_service import UserService

__all__ = [
    "CalendarService",
    "CompanyService",
    "EmailAttachment",
    "EmailClient",
    "EmailResult",
    "InvitationService",
    "JWTService",
    "MatchingService",
    "NotificationService",
    "OpportunityService",
    "RecipientResult",
    "Service",
    "TeamService",
    "TokenFactory",
    "UserService",
]
