"""Page entity.

A page is the addressable unit within a site that hosts one thread.
Pages are created lazily the first time a (site, page identifier) pair
is seen.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import PageId, PageSlug, SiteId


class Page(DomainModel):
    """Page entity. The slug is unique within its site."""

    id: Optional[PageId] = None  # Assigned by the store
    site_id: SiteId
    slug: PageSlug
    title: Optional[str] = None
    url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class PageSummary(DomainModel):
    """Page with counts derived from its comment rows.

    Counts are recomputed on read and never stored.
    """

    page: Page
    comment_count: int = 0
    pending_count: int = 0
    latest_comment_at: Optional[datetime] = None
