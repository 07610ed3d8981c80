"""Domain layer DI providers."""

from dishka import Scope, provide

from liftout.config import AuthSettings, InvitationSettings, MatchingSettings
from liftout.domain.repository import (
    CompanyRepository,
    InvitationRepository,
    MembershipRepository,
    OpportunityRepository,
    TeamRepository,
    UserRepository,
)
from liftout.domain.service import (
    CalendarService,
    CompanyService,
    EmailClient,
    InvitationService,
    JWTService,
    MatchingService,
    NotificationService,
    OpportunityService,
    TeamService,
    UserService,
)
from liftout.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories
    and, in production, its database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_team_service(
        self,
        team_repository: TeamRepository,
        membership_repository: MembershipRepository,
    ) -> TeamService:
        return TeamService(
            team_repository=team_repository,
            membership_repository=membership_repository,
        )

    @provide
    def get_company_service(
        self,
        company_repository: CompanyRepository,
        membership_repository: MembershipRepository,
    ) -> CompanyService:
        return CompanyService(
            company_repository=company_repository,
            membership_repository=membership_repository,
        )

    @provide
    def get_opportunity_service(
        self, opportunity_repository: OpportunityRepository
    ) -> OpportunityService:
        return OpportunityService(opportunity_repository=opportunity_repository)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
        settings: InvitationSettings,
    ) -> InvitationService:
        return InvitationService(
            invitation_repository=invitation_repository,
            membership_repository=membership_repository,
            user_repository=user_repository,
            settings=settings,
        )

    @provide
    def get_matching_service(self, settings: MatchingSettings) -> MatchingService:
        return MatchingService(settings=settings)

    @provide
    def get_calendar_service(self) -> CalendarService:
        return CalendarService()

    @provide
    def get_notification_service(self, email_client: EmailClient) -> NotificationService:
        return NotificationService(email_client=email_client)
