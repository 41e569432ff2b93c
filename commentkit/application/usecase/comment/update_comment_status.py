"""Update comment status use case (single moderation action)."""

from pydantic import BaseModel

from commentkit.domain.error import NotAuthorizedError, NotFoundError
from commentkit.domain.service import CommentService, ModerationService, SiteService
from commentkit.domain.value import CommentId, CommentStatus, UserId


class UpdateCommentStatusRequest(BaseModel):
    comment_id: int
    status: CommentStatus
    user_id: int


class UpdateCommentStatusResponse(BaseModel):
    id: int
    status: CommentStatus
    updated: bool


class UpdateCommentStatusUseCase:
    """Use case for moving one comment to a new moderation status.

    Only the owner of the comment's site may do this.
    """

    def __init__(
        self,
        comment_service: CommentService,
        site_service: SiteService,
        moderation_service: ModerationService,
    ) -> None:
        self.comment_service = comment_service
        self.site_service = site_service
        self.moderation_service = moderation_service

    async def execute(
        self, request: UpdateCommentStatusRequest
    ) -> UpdateCommentStatusResponse:
        """Execute update status flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user does not own the comment's site
        """
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        comment = await self.comment_service.get_comment(comment_id)
        site = await self.site_service.get_site(comment.site_id)
        if not site.is_owned_by(user_id):
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))

        updated = await self.moderation_service.update_status(
            comment_id, request.status, actor_id=user_id
        )
        if not updated:
            # Deleted between the ownership check and the update
            raise NotFoundError("Comment", str(comment_id))

        return UpdateCommentStatusResponse(
            id=comment_id, status=request.status, updated=True
        )
