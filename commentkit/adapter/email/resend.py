"""Magic-link delivery through the Resend HTTP API."""

from dataclasses import dataclass
from html import escape

import httpx
import logfire

from commentkit.adapter.error import EmailDeliveryError
from commentkit.domain.service.auth_service import EmailSender
from commentkit.domain.value import Email

SUBJECT = "Your login link for CommentKit"


def render_magic_link_email(link_url: str) -> str:
    """Render the HTML body of a login e-mail."""
    url = escape(link_url, quote=True)
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><body style="font-family: sans-serif; color: #1f2937;">'
        "<h1>Sign in to CommentKit</h1>"
        "<p>Click the button below to sign in. The link expires shortly and "
        "can only be used once.</p>"
        f'<p><a href="{url}" style="background: #6366f1; color: #fff; '
        f'padding: 12px 24px; border-radius: 8px; text-decoration: none;">Sign in</a></p>'
        f"<p>Or paste this URL into your browser:<br>{url}</p>"
        "<p>If you did not request this e-mail you can ignore it.</p>"
        "</body></html>"
    )


class ResendEmailSender(EmailSender):
    """Sends login links with Resend.

    Without an API key the link is logged instead, which is the expected
    setup for local development.
    """

    def __init__(
        self,
        api_key: str | None,
        from_address: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Resend sender.

        Args:
            api_key: Resend API key (None disables delivery)
            from_address: Sender shown to the recipient
            api_url: Resend e-mails endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.from_address = from_address
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def send_magic_link(self, email: Email, link_url: str) -> None:
        """Send a login link.

        Raises:
            EmailDeliveryError: If Resend rejects the message or is unreachable
        """
        if not self.api_key:
            logfire.warn(
                "Resend API key not configured, magic link not sent",
                email=email.root,
                link_url=link_url,
            )
            return

        payload = {
            "from": self.from_address,
            "to": [email.root],
            "subject": SUBJECT,
            "html": render_magic_link_email(link_url),
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Resend HTTP error", error=str(e))
            raise EmailDeliveryError(f"HTTP error sending e-mail: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Resend rejected e-mail",
                status_code=response.status_code,
                error=response.text,
            )
            raise EmailDeliveryError(f"E-mail provider returned {response.status_code}")

        logfire.info(
            "Magic link e-mail sent",
            email=email.root,
            message_id=response.json().get("id"),
        )


@dataclass
class SentEmail:
    """A message captured by MockEmailSender."""

    to: str
    link_url: str


class MockEmailSender(EmailSender):
    """E-mail sender for testing.

    Records every message in an outbox instead of sending it.
    """

    def __init__(self) -> None:
        self.outbox: list[SentEmail] = []

    async def send_magic_link(self, email: Email, link_url: str) -> None:
        self.outbox.append(SentEmail(to=email.root, link_url=link_url))

    def last_token(self) -> str | None:
        """Token carried by the most recent link, if any."""
        if not self.outbox:
            return None
        query = httpx.URL(self.outbox[-1].link_url).params
        return query.get("token")
