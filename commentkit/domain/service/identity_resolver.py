"""Identity resolution for comment submissions."""

import logfire

from commentkit.config import ModerationSettings
from commentkit.domain.error import ValidationError
from commentkit.domain.model import User
from commentkit.domain.value import Author, Email, GuestAuthor, UserAuthor

from .base import Service
from .sanitize import sanitize_text


class IdentityResolver(Service):
    """Maps an inbound submission to a canonical author.

    A session user always wins: guest fields sent alongside a valid session
    are ignored. Without a session the guest name is required and the guest
    e-mail, when given, is reduced to its hash. Resolution is a pure mapping
    and never touches storage.
    """

    def __init__(self, moderation_settings: ModerationSettings) -> None:
        self.settings = moderation_settings

    def resolve(
        self,
        session_user: User | None,
        guest_name: str | None = None,
        guest_email: str | None = None,
    ) -> Author:
        """Resolve the author of a submission.

        Args:
            session_user: Authenticated user, if the request carried a session
            guest_name: Display name typed by a guest
            guest_email: Optional guest e-mail, used only for avatar lookup

        Returns:
            UserAuthor or GuestAuthor

        Raises:
            ValidationError: If there is no session and no usable guest name
        """
        if session_user is not None:
            if session_user.id is None:
                raise ValidationError("Session user has no id")
            return UserAuthor(
                user_id=session_user.id,
                display_name=session_user.effective_name,
                email_hash=session_user.email_hash,
            )

        name = sanitize_text(guest_name or "")
        if not name:
            logfire.warn("Guest submission without author name")
            raise ValidationError("author_name is required for anonymous comments")
        if len(name) > self.settings.max_author_name_length:
            raise ValidationError(
                f"author_name must be at most {self.settings.max_author_name_length} characters"
            )

        email_hash = None
        if guest_email and guest_email.strip():
            try:
                email_hash = Email(guest_email).gravatar_hash()
            except ValueError:
                raise ValidationError("author_email is not a valid e-mail address")

        return GuestAuthor(name=name, email_hash=email_hash)

    def clean_content(self, content: str | None) -> str:
        """Sanitise comment content and enforce the length limits.

        Raises:
            ValidationError: If content is empty after sanitising or too long
        """
        cleaned = sanitize_text(content or "")
        if not cleaned:
            raise ValidationError("content is required")
        if len(cleaned) > self.settings.max_content_length:
            raise ValidationError(
                f"content must be at most {self.settings.max_content_length} characters"
            )
        return cleaned
