"""Site comment queue use case."""

from pydantic import BaseModel, Field

from commentkit.application.usecase.comment import CommentItem
from commentkit.domain.model import Comment
from commentkit.domain.service import CommentService, SiteService
from commentkit.domain.value import CommentStatus, SiteId, UserId


class SiteCommentItem(CommentItem):
    """Comment in the dashboard queue, with the page it belongs to."""

    page_id: int

    @classmethod
    def from_comment(cls, comment: Comment, liked_ids: set[int] | None = None):
        item = CommentItem.from_comment(comment, liked_ids)
        return cls(**item.model_dump(), page_id=comment.page_id)


class ListSiteCommentsRequest(BaseModel):
    site_id: int
    user_id: int
    status: CommentStatus | None = None  # None lists every status
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListSiteCommentsResponse(BaseModel):
    comments: list[SiteCommentItem]
    total: int
    limit: int
    offset: int


class ListSiteCommentsUseCase:
    """Use case for the owner's moderation queue, newest first."""

    def __init__(
        self, site_service: SiteService, comment_service: CommentService
    ) -> None:
        self.site_service = site_service
        self.comment_service = comment_service

    async def execute(
        self, request: ListSiteCommentsRequest
    ) -> ListSiteCommentsResponse:
        """List comments across the site in any requested status.

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user does not own the site
        """
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )
        comments = await self.comment_service.list_site_comments(
            site.id, status=request.status, limit=request.limit, offset=request.offset
        )
        counts = await self.comment_service.count_by_status(site.id)
        total = (
            counts.get(request.status, 0)
            if request.status
            else sum(counts.values())
        )
        return ListSiteCommentsResponse(
            comments=[SiteCommentItem.from_comment(c) for c in comments],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
