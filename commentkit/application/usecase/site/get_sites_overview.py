"""Sites overview use case (dashboard landing page)."""

from pydantic import BaseModel

from commentkit.domain.service import SiteService
from commentkit.domain.value import UserId

from .list_sites import SiteStatsInfo, SiteSummary


class SiteOverview(SiteSummary):
    stats: SiteStatsInfo


class AggregatedStats(SiteStatsInfo):
    total_sites: int


class GetSitesOverviewRequest(BaseModel):
    user_id: int


class GetSitesOverviewResponse(BaseModel):
    sites: list[SiteOverview]
    aggregated: AggregatedStats


class GetSitesOverviewUseCase:
    """Use case for listing all of an owner's sites with their stats."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(
        self, request: GetSitesOverviewRequest
    ) -> GetSitesOverviewResponse:
        sites = await self.site_service.list_sites(UserId(request.user_id))

        overviews = []
        for site in sites:
            stats = SiteStatsInfo.from_stats(await self.site_service.get_stats(site.id))
            overviews.append(
                SiteOverview(**SiteSummary.from_site(site).model_dump(), stats=stats)
            )

        return GetSitesOverviewResponse(
            sites=overviews,
            aggregated=AggregatedStats(
                total_sites=len(overviews),
                total_pages=sum(o.stats.total_pages for o in overviews),
                total_comments=sum(o.stats.total_comments for o in overviews),
                pending_comments=sum(o.stats.pending_comments for o in overviews),
                total_likes=sum(o.stats.total_likes for o in overviews),
            ),
        )
