"""User aggregate root.

Users sign in with a magic link sent to their e-mail address and are
created on the first successful verification.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: Optional[UserId] = None  # Assigned by the store
    email: Email
    display_name: Optional[str] = Field(default=None, max_length=100)
    is_superadmin: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def email_hash(self) -> str:
        """Avatar lookup hash."""
        return self.email.gravatar_hash()

    @property
    def effective_name(self) -> str:
        """Display name, falling back to the e-mail local part."""
        return self.display_name or self.email.local_part
