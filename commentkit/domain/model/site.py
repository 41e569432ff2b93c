"""Site aggregate root.

A site is a registered domain owning comment threads. It is owned by
exactly one user and must be verified before the widget loads on it.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import Domain, SiteId, UserId


class Site(DomainModel):
    """Site aggregate root."""

    id: Optional[SiteId] = None  # Assigned by the store
    name: str = Field(min_length=1, max_length=100)
    domain: Domain
    api_key: str
    owner_id: UserId
    settings: dict[str, Any] = Field(default_factory=dict)
    verified: bool = False
    verified_at: Optional[datetime] = None
    verification_token: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_owned_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and self.owner_id == user_id

    @property
    def trusted_emails(self) -> list[str]:
        """Per-site allow-list of author e-mails that skip moderation."""
        value = self.settings.get("trusted_emails", [])
        if not isinstance(value, list):
            return []
        return [str(email).strip().lower() for email in value]
