"""Verify site ownership use case."""

from datetime import datetime

from pydantic import BaseModel

from commentkit.config import VerificationSettings
from commentkit.domain.service import SiteService
from commentkit.domain.value import SiteId, UserId


class VerifySiteRequest(BaseModel):
    site_id: int
    user_id: int


class VerifySiteResponse(BaseModel):
    """Verification result, with instructions when the check failed."""

    verified: bool
    verified_at: datetime | None
    domain: str
    verification_url: str
    verification_token: str


class VerifySiteUseCase:
    """Use case for checking the well-known verification file of a site."""

    def __init__(
        self,
        site_service: SiteService,
        verification_settings: VerificationSettings,
    ) -> None:
        self.site_service = site_service
        self.verification_settings = verification_settings

    async def execute(self, request: VerifySiteRequest) -> VerifySiteResponse:
        """Run the ownership check.

        A failed check is not an error: the response reports verified=False
        and repeats where the token has to be published.

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user does not own the site
        """
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        site = await self.site_service.verify_site(site)
        return VerifySiteResponse(
            verified=site.verified,
            verified_at=site.verified_at,
            domain=site.domain.root,
            verification_url=(
                f"https://{site.domain.root}{self.verification_settings.well_known_path}"
            ),
            verification_token=site.verification_token,
        )
