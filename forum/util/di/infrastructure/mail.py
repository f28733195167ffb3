"""Mail relay infrastructure providers."""

from dishka import Scope, provide
import logfire

from forum.adapter.mail import DisabledMailClient, HttpMailClient, MailClient
from forum.config import MailSettings
from forum.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(self, mail_settings: MailSettings) -> MailClient:
        """Provide the mail relay client.

        Returns:
            HTTP relay client, or a no-op client when mail is disabled
        """
        if not mail_settings.enabled:
            logfire.info("Mail delivery disabled")
            return DisabledMailClient()

        return HttpMailClient(mail_settings)
