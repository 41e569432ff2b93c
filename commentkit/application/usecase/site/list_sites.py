"""List sites use case."""

from datetime import datetime

from pydantic import BaseModel

from commentkit.domain.model import Site
from commentkit.domain.service import SiteService, SiteStats
from commentkit.domain.value import UserId

API_KEY_PREVIEW = "********"


class SiteSummary(BaseModel):
    """Site as listed on the dashboard. The API key is never listed."""

    id: int
    name: str
    domain: str
    api_key_preview: str = API_KEY_PREVIEW
    verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_site(cls, site: Site) -> "SiteSummary":
        return cls(
            id=site.id,
            name=site.name,
            domain=site.domain.root,
            verified=site.verified,
            created_at=site.created_at,
            updated_at=site.updated_at,
        )


class SiteStatsInfo(BaseModel):
    total_pages: int
    total_comments: int
    pending_comments: int
    total_likes: int

    @classmethod
    def from_stats(cls, stats: SiteStats) -> "SiteStatsInfo":
        return cls(
            total_pages=stats.total_pages,
            total_comments=stats.total_comments,
            pending_comments=stats.pending_comments,
            total_likes=stats.total_likes,
        )


class ListSitesRequest(BaseModel):
    user_id: int


class ListSitesResponse(BaseModel):
    sites: list[SiteSummary]


class ListSitesUseCase:
    """Use case for listing the caller's sites."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: ListSitesRequest) -> ListSitesResponse:
        sites = await self.site_service.list_sites(UserId(request.user_id))
        return ListSitesResponse(sites=[SiteSummary.from_site(s) for s in sites])
