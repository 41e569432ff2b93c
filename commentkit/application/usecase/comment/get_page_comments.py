"""Get page comments use case (widget bootstrap)."""

from datetime import datetime

from pydantic import BaseModel

from commentkit.domain.model import Comment
from commentkit.domain.service import (
    CommentNode,
    CommentService,
    LikeService,
    PageService,
    SiteService,
    assemble_tree,
)
from commentkit.domain.value import CommentStatus, Domain, LikeSubject, LikeTarget, PageSlug, UserId


class CommentItem(BaseModel):
    """Comment as shown to readers. Never carries a plaintext e-mail."""

    id: int
    author_name: str
    author_email_hash: str | None
    content: str
    parent_id: int | None
    status: CommentStatus
    likes: int
    user_liked: bool
    is_edited: bool
    created_at: datetime
    replies: list["CommentItem"] = []

    @classmethod
    def from_comment(
        cls, comment: Comment, liked_ids: set[int] | None = None
    ) -> "CommentItem":
        return cls(
            id=comment.id,
            author_name=comment.author_name,
            author_email_hash=comment.author.email_hash,
            content=comment.content,
            parent_id=comment.parent_id,
            status=comment.status,
            likes=comment.like_count,
            user_liked=comment.id in (liked_ids or set()),
            is_edited=comment.is_edited,
            created_at=comment.created_at,
        )

    @classmethod
    def from_node(cls, node: CommentNode, liked_ids: set[int]) -> "CommentItem":
        item = cls.from_comment(node.comment, liked_ids)
        item.replies = [cls.from_node(reply, liked_ids) for reply in node.replies]
        return item


class GetPageCommentsRequest(BaseModel):
    """Get page comments request."""

    domain: str
    page_id: str  # Caller's page identifier, used as the slug
    title: str | None = None
    url: str | None = None
    user_id: int | None = None  # From the session cookie, if any


class GetPageCommentsResponse(BaseModel):
    """Page metadata with its approved comment tree."""

    page_id: int
    slug: str
    title: str | None
    comment_count: int
    likes: int
    user_liked: bool
    comments: list[CommentItem]


class GetPageCommentsUseCase:
    """Use case for loading a page's public thread."""

    def __init__(
        self,
        site_service: SiteService,
        page_service: PageService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        """Initialize get page comments use case.

        Args:
            site_service: Site domain service
            page_service: Page domain service
            comment_service: Comment domain service
            like_service: Like domain service
        """
        self.site_service = site_service
        self.page_service = page_service
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: GetPageCommentsRequest) -> GetPageCommentsResponse:
        """Execute get page comments flow.

        Steps:
        1. Resolve the site by domain
        2. Get or create the page for the page identifier
        3. Load approved comments and assemble the display tree
        4. Attach like totals and the caller's like state

        Raises:
            NotFoundError: If no site is registered for the domain
            ValueError: If the domain or page identifier is malformed
        """
        site = await self.site_service.get_site_by_domain(Domain(request.domain))
        page = await self.page_service.get_or_create(
            site_id=site.id,
            slug=PageSlug(request.page_id),
            title=request.title,
            url=request.url,
        )

        comments = await self.comment_service.list_comments(
            page.id, [CommentStatus.APPROVED]
        )

        subject = LikeSubject.for_user(UserId(request.user_id)) if request.user_id else None
        liked_ids = await self.like_service.liked_comment_ids(
            [c.id for c in comments], subject
        )
        page_likes = await self.like_service.stats(LikeTarget.PAGE, page.id, subject)

        return GetPageCommentsResponse(
            page_id=page.id,
            slug=page.slug.root,
            title=page.title,
            comment_count=len(comments),
            likes=page_likes.total_likes,
            user_liked=page_likes.liked,
            comments=[
                CommentItem.from_node(node, liked_ids)
                for node in assemble_tree(comments)
            ],
        )
