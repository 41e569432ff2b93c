"""Page domain service."""

import logfire

from commentkit.domain.error import NotFoundError
from commentkit.domain.model import Page, PageSummary
from commentkit.domain.repository import PageRepository
from commentkit.domain.value import PageId, PageSlug, SiteId

from .base import Service


class PageService(Service):
    """Domain service for page operations."""

    def __init__(self, page_repository: PageRepository) -> None:
        """Initialize page service.

        Args:
            page_repository: Page repository
        """
        self.page_repository = page_repository

    async def get_or_create(
        self,
        site_id: SiteId,
        slug: PageSlug,
        title: str | None = None,
        url: str | None = None,
    ) -> Page:
        """Return the page for (site, slug), creating it on first reference.

        Args:
            site_id: Owning site
            slug: Caller-supplied page identifier
            title: Page title, stored only when the page is created
            url: Canonical URL, stored only when the page is created

        Returns:
            Existing or newly created page
        """
        with logfire.span(
            "page_service.get_or_create", site_id=str(site_id), slug=slug.root
        ):
            page = await self.page_repository.find_by_slug(site_id, slug)
            if page:
                return page

            page = await self.page_repository.save(
                Page(site_id=site_id, slug=slug, title=title or None, url=url or None)
            )
            logfire.info("Page created", page_id=str(page.id), site_id=str(site_id))
            return page

    async def get_page(self, page_id: PageId) -> Page:
        """Get a page by ID.

        Raises:
            NotFoundError: If the page does not exist
        """
        with logfire.span("page_service.get_page", page_id=str(page_id)):
            page = await self.page_repository.find_by_id(page_id)
            if not page:
                logfire.warn("Page not found", page_id=str(page_id))
                raise NotFoundError("Page", str(page_id))
            return page

    async def list_summaries(self, site_id: SiteId) -> list[PageSummary]:
        """List pages of a site with their derived comment counts."""
        with logfire.span("page_service.list_summaries", site_id=str(site_id)):
            summaries = await self.page_repository.list_summaries(site_id)
            logfire.info("Page summaries listed", site_id=str(site_id), count=len(summaries))
            return summaries

    async def count(self, site_id: SiteId | None = None) -> int:
        return await self.page_repository.count(site_id)
