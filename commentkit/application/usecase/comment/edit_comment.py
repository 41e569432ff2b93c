"""Edit comment use case."""

from pydantic import BaseModel

from commentkit.domain.service import CommentService, IdentityResolver
from commentkit.domain.value import CommentId, UserId

from .get_page_comments import CommentItem


class EditCommentRequest(BaseModel):
    comment_id: int
    user_id: int
    content: str | None = None


class EditCommentUseCase:
    """Use case for an author editing their own comment."""

    def __init__(
        self, comment_service: CommentService, identity_resolver: IdentityResolver
    ) -> None:
        self.comment_service = comment_service
        self.identity_resolver = identity_resolver

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Replace a comment's content.

        Raises:
            ValidationError: If the new content is empty or too long
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        content = self.identity_resolver.clean_content(request.content)
        comment = await self.comment_service.edit_comment(
            CommentId(request.comment_id), UserId(request.user_id), content
        )
        return CommentItem.from_comment(comment)
