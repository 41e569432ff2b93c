"""Like entity.

A like is an idempotent reaction by a subject on a page or a comment.
At most one like exists per (subject, target) pair.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import LikeId, LikeSubject, LikeTarget, SiteId


class Like(DomainModel):
    """Like entity."""

    id: Optional[LikeId] = None
    site_id: SiteId  # Site owning the target
    target_kind: LikeTarget
    target_id: int  # PageId or CommentId
    subject: LikeSubject
    created_at: datetime = Field(default_factory=utcnow)
