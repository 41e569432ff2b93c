"""Update site use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from commentkit.domain.service import SiteService
from commentkit.domain.value import Domain, SiteId, UserId


class UpdateSiteRequest(BaseModel):
    site_id: int
    user_id: int
    name: str | None = Field(default=None, min_length=1, max_length=100)
    domain: str | None = None
    settings: dict[str, Any] | None = None


class UpdateSiteResponse(BaseModel):
    id: int
    name: str
    domain: str
    settings: dict[str, Any]
    verified: bool
    updated_at: datetime


class UpdateSiteUseCase:
    """Use case for changing a site's name, domain or settings."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: UpdateSiteRequest) -> UpdateSiteResponse:
        """Apply the changes. A new domain must be verified again.

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user does not own the site
            ConflictError: If the new domain belongs to another site
        """
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        updated = await self.site_service.update_site(
            site,
            name=request.name.strip() if request.name else None,
            domain=Domain(request.domain) if request.domain else None,
            settings=request.settings,
        )
        return UpdateSiteResponse(
            id=updated.id,
            name=updated.name,
            domain=updated.domain.root,
            settings=updated.settings,
            verified=updated.verified,
            updated_at=updated.updated_at,
        )
