"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .edit_comment import EditCommentRequest, EditCommentUseCase
from .get_page_comments import (
    CommentItem,
    GetPageCommentsRequest,
    GetPageCommentsResponse,
    GetPageCommentsUseCase,
)
from .update_comment_status import (
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetPageCommentsRequest",
    "GetPageCommentsResponse",
    "GetPageCommentsUseCase",
    "UpdateCommentStatusRequest",
    "UpdateCommentStatusResponse",
    "UpdateCommentStatusUseCase",
]
