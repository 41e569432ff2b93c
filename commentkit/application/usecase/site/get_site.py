"""Get site detail use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from commentkit.domain.service import CommentService, SiteService
from commentkit.domain.value import CommentStatus, SiteId, UserId

from .list_site_comments import SiteCommentItem
from .list_sites import SiteStatsInfo


class GetSiteRequest(BaseModel):
    site_id: int
    user_id: int
    include_comments: bool = True
    comment_status: CommentStatus | None = None
    comment_limit: int = Field(default=50, ge=1, le=200)
    comment_offset: int = Field(default=0, ge=0)


class SiteDetailResponse(BaseModel):
    """Site detail for its owner. The API key stays hidden."""

    id: int
    name: str
    domain: str
    api_key: str = "HIDDEN"
    settings: dict[str, Any]
    verified: bool
    verified_at: datetime | None
    verification_token: str
    created_at: datetime
    updated_at: datetime
    stats: SiteStatsInfo
    comments: list[SiteCommentItem] | None = None
    comments_total: int | None = None


class GetSiteUseCase:
    """Use case for loading one site with stats and its latest comments."""

    def __init__(
        self, site_service: SiteService, comment_service: CommentService
    ) -> None:
        self.site_service = site_service
        self.comment_service = comment_service

    async def execute(self, request: GetSiteRequest) -> SiteDetailResponse:
        """Load site detail.

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user does not own the site
        """
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        stats = await self.site_service.get_stats(site.id)

        response = SiteDetailResponse(
            id=site.id,
            name=site.name,
            domain=site.domain.root,
            settings=site.settings,
            verified=site.verified,
            verified_at=site.verified_at,
            verification_token=site.verification_token,
            created_at=site.created_at,
            updated_at=site.updated_at,
            stats=SiteStatsInfo.from_stats(stats),
        )

        if request.include_comments:
            comments = await self.comment_service.list_site_comments(
                site.id,
                status=request.comment_status,
                limit=request.comment_limit,
                offset=request.comment_offset,
            )
            counts = await self.comment_service.count_by_status(site.id)
            response.comments = [SiteCommentItem.from_comment(c) for c in comments]
            response.comments_total = (
                counts.get(request.comment_status, 0)
                if request.comment_status
                else sum(counts.values())
            )

        return response
