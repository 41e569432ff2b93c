"""Comment routes used by the widget and the moderation dashboard."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from commentkit.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetPageCommentsRequest,
    GetPageCommentsResponse,
    GetPageCommentsUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)
from commentkit.config import AuthSettings
from commentkit.domain.error import ValidationError
from commentkit.domain.service import JWTService
from commentkit.domain.value import CommentStatus
from commentkit.interface.api.session import optional_user_id, parse_id, require_user_id

router = APIRouter(prefix="/api/v1", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment from the widget."""

    domain: str = Field(min_length=1)
    pageId: str = Field(min_length=1)
    content: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    parent_id: int | None = None  # Parent comment ID for replies
    page_title: str | None = None
    page_url: str | None = None


class UpdateStatusAPIRequest(BaseModel):
    status: CommentStatus


class EditCommentAPIRequest(BaseModel):
    content: str | None = None


@router.get("/sites/comments", response_model=GetPageCommentsResponse)
async def get_page_comments(
    request: Request,
    get_page_comments_use_case: FromDishka[GetPageCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    domain: str | None = None,
    pageId: str | None = None,
    title: str | None = None,
    url: str | None = None,
) -> GetPageCommentsResponse:
    """Page bootstrap: page metadata, approved comment tree and likes.

    Creates the page on first request.
    """
    if not domain:
        raise ValidationError("domain parameter is required")
    if not pageId:
        raise ValidationError("pageId parameter is required")

    return await get_page_comments_use_case.execute(
        GetPageCommentsRequest(
            domain=domain,
            page_id=pageId,
            title=title,
            url=url,
            user_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )


@router.post(
    "/sites/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: Request,
    body: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CommentItem:
    """Post a comment or a reply.

    Guests must give author_name; with a session the guest fields are
    ignored. The comment starts pending unless the trust policy approves it.
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            domain=body.domain,
            page_id=body.pageId,
            content=body.content,
            author_name=body.author_name,
            author_email=body.author_email,
            parent_id=body.parent_id,
            page_title=body.page_title,
            page_url=body.page_url,
            user_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )


@router.patch("/sites/comments/{comment_id}/status", response_model=UpdateCommentStatusResponse)
async def update_comment_status(
    comment_id: str,
    request: Request,
    body: UpdateStatusAPIRequest,
    update_status_use_case: FromDishka[UpdateCommentStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UpdateCommentStatusResponse:
    """Moderate one comment. Requires ownership of the comment's site."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await update_status_use_case.execute(
        UpdateCommentStatusRequest(
            comment_id=parse_id(comment_id, "comment_id"),
            status=body.status,
            user_id=user_id,
        )
    )


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def edit_comment(
    comment_id: str,
    request: Request,
    body: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CommentItem:
    """Edit a comment's content. Only its author may do this."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await edit_comment_use_case.execute(
        EditCommentRequest(
            comment_id=parse_id(comment_id, "comment_id"),
            user_id=user_id,
            content=body.content,
        )
    )
