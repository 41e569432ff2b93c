"""Page repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentkit.domain.model.page import Page, PageSummary
from commentkit.domain.value import PageId, PageSlug, SiteId


class PageRepository(ABC):
    """Repository for Page entity."""

    @abstractmethod
    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        pass

    @abstractmethod
    async def find_by_slug(self, site_id: SiteId, slug: PageSlug) -> Optional[Page]:
        """Find the page with this slug within a site."""
        pass

    @abstractmethod
    async def save(self, page: Page) -> Page:
        """Insert a page.

        If a page with the same (site, slug) was inserted concurrently, the
        existing row is returned instead of failing.
        """
        pass

    @abstractmethod
    async def list_summaries(self, site_id: SiteId) -> List[PageSummary]:
        """List pages of a site with comment counts recomputed from rows.

        Ordered by latest comment first, pages without comments last.
        """
        pass

    @abstractmethod
    async def count(self, site_id: Optional[SiteId] = None) -> int:
        pass
