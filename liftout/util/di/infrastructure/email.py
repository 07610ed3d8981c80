"""Email infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import httpx

from liftout.adapter.email import ResendEmailClient
from liftout.config import EmailSettings
from liftout.domain.service import EmailClient
from liftout.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Delivers email through the Resend HTTP API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: EmailSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_email_client(
        self, settings: EmailSettings, http_client: httpx.AsyncClient
    ) -> EmailClient:
        return ResendEmailClient(settings, http_client=http_client)
