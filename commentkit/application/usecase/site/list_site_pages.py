"""List site pages use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from commentkit.domain.model import PageSummary
from commentkit.domain.service import PageService, SiteService
from commentkit.domain.value import SiteId, UserId


class PageItem(BaseModel):
    """Page with counts recomputed from its comments."""

    id: int
    slug: str
    title: str | None
    url: str | None
    comment_count: int
    pending_count: int
    latest_comment_at: datetime | None
    created_at: datetime

    @classmethod
    def from_summary(cls, summary: PageSummary) -> "PageItem":
        return cls(
            id=summary.page.id,
            slug=summary.page.slug.root,
            title=summary.page.title,
            url=summary.page.url,
            comment_count=summary.comment_count,
            pending_count=summary.pending_count,
            latest_comment_at=summary.latest_comment_at,
            created_at=summary.page.created_at,
        )


class ListSitePagesRequest(BaseModel):
    site_id: int
    user_id: int
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListSitePagesResponse(BaseModel):
    pages: list[PageItem]
    total: int
    limit: int
    offset: int


class ListSitePagesUseCase:
    """Use case for listing a site's pages, most recently commented first."""

    def __init__(self, site_service: SiteService, page_service: PageService) -> None:
        self.site_service = site_service
        self.page_service = page_service

    async def execute(self, request: ListSitePagesRequest) -> ListSitePagesResponse:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        summaries = await self.page_service.list_summaries(site.id)
        window = summaries[request.offset : request.offset + request.limit]
        return ListSitePagesResponse(
            pages=[PageItem.from_summary(s) for s in window],
            total=len(summaries),
            limit=request.limit,
            offset=request.offset,
        )
