"""E-mail infrastructure providers."""

from dishka import Scope, provide

from commentkit.adapter.email import ResendEmailSender
from commentkit.config import EmailSettings
from commentkit.domain.service import EmailSender
from commentkit.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """E-mail component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production e-mail provider sending through Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide Resend sender (logs links when no API key is set)."""
        return ResendEmailSender(
            api_key=email_settings.resend_api_key,
            from_address=email_settings.from_address,
            api_url=email_settings.api_url,
            timeout=email_settings.timeout_seconds,
        )
