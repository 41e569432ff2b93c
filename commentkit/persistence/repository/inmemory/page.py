"""In-memory page repository for testing."""

from typing import List, Optional

from commentkit.domain.model.page import Page, PageSummary
from commentkit.domain.repository.page import PageRepository
from commentkit.domain.value import CommentStatus, PageId, PageSlug, SiteId

from .store import InMemoryStore


class InMemoryPageRepository(PageRepository):
    """In-memory implementation of PageRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        return self._store.pages.get(page_id)

    async def find_by_slug(self, site_id: SiteId, slug: PageSlug) -> Optional[Page]:
        for page in self._store.pages.values():
            if page.site_id == site_id and page.slug == slug:
                return page
        return None

    async def save(self, page: Page) -> Page:
        existing = await self.find_by_slug(page.site_id, page.slug)
        if existing:
            return existing
        page = page.model_copy(update={"id": PageId(self._store.next_id("pages"))})
        self._store.pages[page.id] = page
        return page

    async def list_summaries(self, site_id: SiteId) -> List[PageSummary]:
        """Recompute counts from the comment rows."""
        summaries = []
        for page in self._store.pages.values():
            if page.site_id != site_id:
                continue
            comments = [c for c in self._store.comments.values() if c.page_id == page.id]
            summaries.append(
                PageSummary(
                    page=page,
                    comment_count=len(comments),
                    pending_count=sum(
                        1 for c in comments if c.status == CommentStatus.PENDING
                    ),
                    latest_comment_at=max((c.created_at for c in comments), default=None),
                )
            )

        # Latest activity first, pages without comments last
        summaries.sort(key=lambda s: s.page.id)
        summaries.sort(
            key=lambda s: s.latest_comment_at.timestamp() if s.latest_comment_at else 0,
            reverse=True,
        )
        return summaries

    async def count(self, site_id: Optional[SiteId] = None) -> int:
        return sum(
            1
            for p in self._store.pages.values()
            if site_id is None or p.site_id == site_id
        )
