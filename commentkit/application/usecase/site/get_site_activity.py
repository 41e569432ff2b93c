"""Site activity feed use case."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from commentkit.domain.service import CommentService, ModerationService, SiteService
from commentkit.domain.value import CommentStatus, SiteId, UserId

PREVIEW_LENGTH = 140


class ActivityItem(BaseModel):
    """One event in the feed: a new comment or a moderation change."""

    type: Literal["comment", "moderation"]
    comment_id: int
    page_id: int | None = None
    author_name: str | None = None
    preview: str | None = None
    status: CommentStatus
    from_status: CommentStatus | None = None
    created_at: datetime


class GetSiteActivityRequest(BaseModel):
    site_id: int
    user_id: int
    limit: int = Field(default=20, ge=1, le=100)


class GetSiteActivityResponse(BaseModel):
    activity: list[ActivityItem]


class GetSiteActivityUseCase:
    """Use case for the dashboard's recent-activity feed.

    Merges the newest comments with the newest moderation changes, most
    recent first.
    """

    def __init__(
        self,
        site_service: SiteService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        self.site_service = site_service
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: GetSiteActivityRequest) -> GetSiteActivityResponse:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )

        comments = await self.comment_service.list_site_comments(
            site.id, limit=request.limit
        )
        log = await self.moderation_service.get_log(site.id, limit=request.limit)

        activity = [
            ActivityItem(
                type="comment",
                comment_id=c.id,
                page_id=c.page_id,
                author_name=c.author_name,
                preview=c.content[:PREVIEW_LENGTH],
                status=c.status,
                created_at=c.created_at,
            )
            for c in comments
        ]
        activity.extend(
            ActivityItem(
                type="moderation",
                comment_id=entry.comment_id,
                status=entry.to_status,
                from_status=entry.from_status,
                created_at=entry.created_at,
            )
            for entry in log
        )
        activity.sort(key=lambda item: item.created_at, reverse=True)

        return GetSiteActivityResponse(activity=activity[: request.limit])
