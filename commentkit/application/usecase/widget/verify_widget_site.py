"""Widget site check use case."""

from pydantic import BaseModel

from commentkit.domain.service import SiteService
from commentkit.domain.value import Domain

NOT_REGISTERED = "This domain is not registered with CommentKit."
NOT_VERIFIED = (
    "This site has not been verified. The site owner must verify domain "
    "ownership to enable comments."
)


class VerifyWidgetSiteRequest(BaseModel):
    domain: str


class VerifyWidgetSiteResponse(BaseModel):
    """Whether the widget may load. Failures are reported in `error`."""

    verified: bool
    site_id: int | None = None
    error: str | None = None


class VerifyWidgetSiteUseCase:
    """Use case the widget calls before it renders on a host page."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: VerifyWidgetSiteRequest) -> VerifyWidgetSiteResponse:
        try:
            domain = Domain(request.domain)
        except ValueError:
            return VerifyWidgetSiteResponse(verified=False, error=NOT_REGISTERED)

        site = await self.site_service.find_site_by_domain(domain)
        if site is None:
            return VerifyWidgetSiteResponse(verified=False, error=NOT_REGISTERED)
        if not site.verified:
            return VerifyWidgetSiteResponse(verified=False, error=NOT_VERIFIED)
        return VerifyWidgetSiteResponse(verified=True, site_id=site.id)
