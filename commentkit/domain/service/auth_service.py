"""Magic-link authentication domain service."""

import secrets
from datetime import timedelta
from urllib.parse import urlencode

import logfire

from commentkit.config import AuthSettings
from commentkit.domain.error import ValidationError
from commentkit.domain.model import MagicLink, User
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository import MagicLinkRepository, UserRepository
from commentkit.domain.value import Email

from .base import Service


class EmailSender:
    """Outbound e-mail interface for login links."""

    async def send_magic_link(self, email: Email, link_url: str) -> None:
        """Deliver a login link.

        Args:
            email: Recipient
            link_url: Full URL containing the single-use token
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for passwordless sign-in.

    A login request stores a single-use token and mails a link carrying
    it. Verifying the token consumes it and returns the user for that
    e-mail, creating the account on first sign-in.
    """

    def __init__(
        self,
        magic_link_repository: MagicLinkRepository,
        user_repository: UserRepository,
        email_sender: EmailSender,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            magic_link_repository: Magic link repository
            user_repository: User repository
            email_sender: Delivery channel for login links
            auth_settings: Authentication settings
        """
        self.magic_link_repository = magic_link_repository
        self.user_repository = user_repository
        self.email_sender = email_sender
        self.auth_settings = auth_settings

    def build_link_url(self, token: str, redirect_url: str | None = None) -> str:
        params = {"token": token}
        if redirect_url:
            params["redirect"] = redirect_url
        return f"{self.auth_settings.magic_link_base_url}?{urlencode(params)}"

    async def request_magic_link(
        self, email: Email, redirect_url: str | None = None
    ) -> MagicLink:
        """Create a login token for an e-mail and send the link.

        Args:
            email: Address to sign in
            redirect_url: Where the dashboard should go after sign-in

        Returns:
            Stored magic link

        Raises:
            EmailDeliveryError: If the e-mail provider rejects the message
        """
        with logfire.span("auth_service.request_magic_link", email=email.root):
            link = await self.magic_link_repository.save(
                MagicLink(
                    email=email,
                    token=secrets.token_hex(32),
                    expires_at=utcnow()
                    + timedelta(minutes=self.auth_settings.magic_link_ttl_minutes),
                )
            )
            await self.email_sender.send_magic_link(
                email, self.build_link_url(link.token, redirect_url)
            )
            logfire.info("Magic link issued", email=email.root)
            return link

    async def verify_magic_link(self, token: str) -> User:
        """Consume a login token and return its user.

        Raises:
            ValidationError: If the token is unknown, used or expired
        """
        with logfire.span("auth_service.verify_magic_link"):
            link = await self.magic_link_repository.find_by_token(token)
            if not link or not link.is_valid(utcnow()):
                logfire.warn("Invalid or expired magic link")
                raise ValidationError("Invalid or expired token")

            if not await self.magic_link_repository.mark_used(token):
                # Consumed by a concurrent request
                raise ValidationError("Invalid or expired token")

            user = await self.user_repository.find_by_email(link.email)
            if user:
                logfire.info("Magic link verified", user_id=str(user.id))
                return user

            user = await self.user_repository.save(User(email=link.email))
            logfire.info("User created from magic link", user_id=str(user.id))
            return user
