"""Regenerate API key use case."""

from pydantic import BaseModel

from commentkit.domain.service import SiteService
from commentkit.domain.value import SiteId, UserId


class RegenerateApiKeyRequest(BaseModel):
    site_id: int
    user_id: int


class RegenerateApiKeyResponse(BaseModel):
    api_key: str


class RegenerateApiKeyUseCase:
    """Use case for replacing a site's API key. The old key stops working."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(
        self, request: RegenerateApiKeyRequest
    ) -> RegenerateApiKeyResponse:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        site = await self.site_service.regenerate_api_key(site)
        return RegenerateApiKeyResponse(api_key=site.api_key)
