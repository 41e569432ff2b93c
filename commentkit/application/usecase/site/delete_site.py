"""Delete site use case."""

from pydantic import BaseModel

from commentkit.domain.service import SiteService
from commentkit.domain.value import SiteId, UserId


class DeleteSiteRequest(BaseModel):
    site_id: int
    user_id: int


class DeleteSiteResponse(BaseModel):
    success: bool


class DeleteSiteUseCase:
    """Use case for deleting a site with all of its pages, comments and likes."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: DeleteSiteRequest) -> DeleteSiteResponse:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        await self.site_service.delete_site(site)
        return DeleteSiteResponse(success=True)
