"""Moderation log use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from commentkit.domain.service import ModerationService, SiteService
from commentkit.domain.value import CommentStatus, SiteId, UserId


class ModerationLogItem(BaseModel):
    id: int
    comment_id: int
    from_status: CommentStatus
    to_status: CommentStatus
    actor_id: int | None
    created_at: datetime


class GetModerationLogRequest(BaseModel):
    site_id: int
    user_id: int
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class GetModerationLogResponse(BaseModel):
    entries: list[ModerationLogItem]
    limit: int
    offset: int


class GetModerationLogUseCase:
    """Use case for reading a site's moderation history, newest first."""

    def __init__(
        self, site_service: SiteService, moderation_service: ModerationService
    ) -> None:
        self.site_service = site_service
        self.moderation_service = moderation_service

    async def execute(
        self, request: GetModerationLogRequest
    ) -> GetModerationLogResponse:
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        entries = await self.moderation_service.get_log(
            site.id, limit=request.limit, offset=request.offset
        )
        return GetModerationLogResponse(
            entries=[
                ModerationLogItem(
                    id=e.id,
                    comment_id=e.comment_id,
                    from_status=e.from_status,
                    to_status=e.to_status,
                    actor_id=e.actor_id,
                    created_at=e.created_at,
                )
                for e in entries
            ],
            limit=request.limit,
            offset=request.offset,
        )
