"""Mock email provider for testing."""

from dishka import Scope, provide

from liftout.adapter.email import MockEmailClient
from liftout.domain.service import EmailClient
from liftout.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Records outgoing email instead of calling Resend.

    APP scope, so a test can fetch the client and inspect what was sent.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_client(self) -> EmailClient:
        return MockEmailClient()
