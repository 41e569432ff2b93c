"""Create site use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from commentkit.domain.service import SiteService
from commentkit.domain.value import Domain, UserId


class CreateSiteRequest(BaseModel):
    user_id: int
    name: str = Field(min_length=1, max_length=100)
    domain: str


class CreateSiteResponse(BaseModel):
    """Newly created site. This is the only response carrying the API key
    besides key regeneration."""

    id: int
    name: str
    domain: str
    api_key: str
    verified: bool
    verification_token: str
    created_at: datetime
    updated_at: datetime


class CreateSiteUseCase:
    """Use case for registering a site."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: CreateSiteRequest) -> CreateSiteResponse:
        """Register the domain for the caller.

        Raises:
            ConflictError: If the domain is already registered
            ValueError: If the domain is not a bare hostname
        """
        site = await self.site_service.create_site(
            owner_id=UserId(request.user_id),
            name=request.name.strip(),
            domain=Domain(request.domain),
        )
        return CreateSiteResponse(
            id=site.id,
            name=site.name,
            domain=site.domain.root,
            api_key=site.api_key,
            verified=site.verified,
            verification_token=site.verification_token,
            created_at=site.created_at,
            updated_at=site.updated_at,
        )
