"""Application layer DI providers."""

from dishka import Scope, provide

from liftout.application.usecase.calendar import ScheduleMeetingUseCase
from liftout.application.usecase.invitation import (
    CreateCompanyInvitationUseCase,
    CreateTeamInvitationUseCase,
    GetInvitationUseCase,
    ListCompanyInvitationsUseCase,
    RespondToInvitationUseCase,
)
from liftout.application.usecase.matching import (
    MatchOpportunitiesUseCase,
    MatchTeamsUseCase,
)
from liftout.application.usecase.opportunity import (
    CloseOpportunityUseCase,
    CreateOpportunityUseCase,
    GetOpportunityUseCase,
)
from liftout.application.usecase.team import CreateTeamUseCase, GetTeamUseCase
from liftout.application.usecase.user import UpdateSkillsUseCase
from liftout.config import AuthSettings, MatchingSettings, Settings
from liftout.domain.service import (
    CalendarService,
    CompanyService,
    InvitationService,
    MatchingService,
    NotificationService,
    OpportunityService,
    TeamService,
    UserService,
)
from liftout.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use cases provider. Every use case lives for one request."""

    scope = Scope.REQUEST

    # Matching
    @provide
    def get_match_teams_use_case(
        self,
        team_service: TeamService,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
        matching_service: MatchingService,
        settings: MatchingSettings,
    ) -> MatchTeamsUseCase:
        return MatchTeamsUseCase(
            team_service=team_service,
            opportunity_service=opportunity_service,
            company_service=company_service,
            matching_service=matching_service,
            settings=settings,
        )

    @provide
    def get_match_opportunities_use_case(
        self,
        team_service: TeamService,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
        matching_service: MatchingService,
        settings: MatchingSettings,
    ) -> MatchOpportunitiesUseCase:
        return MatchOpportunitiesUseCase(
            team_service=team_service,
            opportunity_service=opportunity_service,
            company_service=company_service,
            matching_service=matching_service,
            settings=settings,
        )

    # Invitations
    @provide
    def get_get_invitation_use_case(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        company_service: CompanyService,
        user_service: UserService,
    ) -> GetInvitationUseCase:
        return GetInvitationUseCase(
            invitation_service=invitation_service,
            team_service=team_service,
            company_service=company_service,
            user_service=user_service,
        )

    @provide
    def get_respond_to_invitation_use_case(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        auth_settings: AuthSettings,
    ) -> RespondToInvitationUseCase:
        return RespondToInvitationUseCase(
            invitation_service=invitation_service,
            team_service=team_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_create_company_invitation_use_case(
        self,
        invitation_service: InvitationService,
        company_service: CompanyService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> CreateCompanyInvitationUseCase:
        return CreateCompanyInvitationUseCase(
            invitation_service=invitation_service,
            company_service=company_service,
            user_service=user_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide
    def get_list_company_invitations_use_case(
        self,
        invitation_service: InvitationService,
        company_service: CompanyService,
    ) -> ListCompanyInvitationsUseCase:
        return ListCompanyInvitationsUseCase(
            invitation_service=invitation_service,
            company_service=company_service,
        )

    @provide
    def get_create_team_invitation_use_case(
        self,
        invitation_service: InvitationService,
        team_service: TeamService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> CreateTeamInvitationUseCase:
        return CreateTeamInvitationUseCase(
            invitation_service=invitation_service,
            team_service=team_service,
            user_service=user_service,
            notification_service=notification_service,
            settings=settings,
        )

    # Teams
    @provide
    def get_create_team_use_case(self, team_service: TeamService) -> CreateTeamUseCase:
        return CreateTeamUseCase(team_service=team_service)

    @provide
    def get_get_team_use_case(self, team_service: TeamService) -> GetTeamUseCase:
        return GetTeamUseCase(team_service=team_service)

    # Opportunities
    @provide
    def get_create_opportunity_use_case(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> CreateOpportunityUseCase:
        return CreateOpportunityUseCase(
            opportunity_service=opportunity_service,
            company_service=company_service,
        )

    @provide
    def get_get_opportunity_use_case(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> GetOpportunityUseCase:
        return GetOpportunityUseCase(
            opportunity_service=opportunity_service,
            company_service=company_service,
        )

    @provide
    def get_close_opportunity_use_case(
        self,
        opportunity_service: OpportunityService,
        company_service: CompanyService,
    ) -> CloseOpportunityUseCase:
        return CloseOpportunityUseCase(
            opportunity_service=opportunity_service,
            company_service=company_service,
        )

    # Calendar
    @provide
    def get_schedule_meeting_use_case(
        self,
        calendar_service: CalendarService,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> ScheduleMeetingUseCase:
        return ScheduleMeetingUseCase(
            calendar_service=calendar_service,
            notification_service=notification_service,
            user_service=user_service,
        )

    # Users
    @provide
    def get_update_skills_use_case(self, user_service: UserService) -> UpdateSkillsUseCase:
        return UpdateSkillsUseCase(user_service=user_service)
