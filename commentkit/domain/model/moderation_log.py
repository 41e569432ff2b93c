"""Moderation log entry: one row per applied status change."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import (
    CommentId,
    CommentStatus,
    ModerationLogId,
    SiteId,
    UserId,
)


class ModerationLogEntry(DomainModel):
    """Audit record of a moderation transition."""

    id: Optional[ModerationLogId] = None
    site_id: SiteId
    comment_id: CommentId
    from_status: CommentStatus
    to_status: CommentStatus
    actor_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)
