"""Site stats use case."""

from pydantic import BaseModel

from commentkit.domain.service import SiteService
from commentkit.domain.value import SiteId, UserId

from .list_sites import SiteStatsInfo


class GetSiteStatsRequest(BaseModel):
    site_id: int
    user_id: int


class GetSiteStatsUseCase:
    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: GetSiteStatsRequest) -> SiteStatsInfo:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        return SiteStatsInfo.from_stats(await self.site_service.get_stats(site.id))
