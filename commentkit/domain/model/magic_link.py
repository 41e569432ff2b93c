"""Magic link entity: a single-use, time-limited login token."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import Email, MagicLinkId


class MagicLink(DomainModel):
    """Magic link entity."""

    id: Optional[MagicLinkId] = None
    email: Email
    token: str = Field(min_length=16)
    expires_at: datetime
    used: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    def is_valid(self, now: datetime) -> bool:
        return not self.used and self.expires_at > now
