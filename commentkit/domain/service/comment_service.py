"""Comment domain service (thread store)."""

import logfire

from commentkit.config import ModerationSettings
from commentkit.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from commentkit.domain.model import Comment, Page, Site
from commentkit.domain.repository import CommentRepository
from commentkit.domain.value import (
    Author,
    CommentId,
    CommentStatus,
    Email,
    PageId,
    SiteId,
    UserAuthor,
    UserId,
)

from .base import Service


def initial_status(
    site: Site,
    author: Author,
    author_email: Email | None,
    settings: ModerationSettings,
) -> CommentStatus:
    """Apply the trust policy to a new comment.

    Guests always start pending. Authenticated authors start approved when
    they own the site, when their e-mail is on the global or per-site
    allow-list, or when auto-approval of authenticated authors is enabled.
    """
    if not isinstance(author, UserAuthor):
        return CommentStatus.PENDING

    if site.is_owned_by(author.user_id):
        return CommentStatus.APPROVED

    if author_email is not None:
        trusted = {e.strip().lower() for e in settings.trusted_emails}
        trusted.update(site.trusted_emails)
        if author_email.root in trusted:
            return CommentStatus.APPROVED

    if settings.auto_approve_authenticated:
        return CommentStatus.APPROVED

    return CommentStatus.PENDING


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            moderation_settings: Trust policy configuration
        """
        self.comment_repository = comment_repository
        self.moderation_settings = moderation_settings

    async def create_comment(
        self,
        site: Site,
        page: Page,
        author: Author,
        content: str,
        parent_id: CommentId | None = None,
        author_email: Email | None = None,
    ) -> Comment:
        """Create a comment on a page or reply to another comment.

        Args:
            site: Site the page belongs to
            page: Page the comment attaches to
            author: Resolved author
            content: Sanitised comment content
            parent_id: Parent comment ID for replies (None for top-level)
            author_email: E-mail of an authenticated author, for the trust policy

        Returns:
            Created comment with its id assigned

        Raises:
            NotFoundError: If the parent comment does not exist
            ValidationError: If the parent belongs to another page
        """
        with logfire.span(
            "comment_service.create_comment",
            site_id=str(site.id),
            page_id=str(page.id),
            author_kind=author.kind,
            parent_id=str(parent_id) if parent_id is not None else None,
        ):
            if page.id is None or site.id is None:
                raise ValidationError("Page and site must be persisted first")

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        page_id=str(page.id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.page_id != page.id:
                    logfire.error(
                        "Parent comment does not belong to page",
                        parent_id=str(parent_id),
                        parent_page_id=str(parent.page_id),
                        target_page_id=str(page.id),
                    )
                    raise ValidationError("Parent comment does not belong to this page")

            status = initial_status(site, author, author_email, self.moderation_settings)

            comment = Comment(
                site_id=site.id,
                page_id=page.id,
                author=author,
                content=content,
                parent_id=parent_id,
                status=status,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                page_id=str(page.id),
                status=status.value,
            )
            return saved

    async def list_comments(
        self,
        page_id: PageId,
        statuses: list[CommentStatus] | None = None,
    ) -> list[Comment]:
        """List comments on a page, oldest first.

        Args:
            page_id: Page ID
            statuses: Statuses to include; defaults to approved only

        Returns:
            Comments ordered by creation time ascending
        """
        statuses = statuses or [CommentStatus.APPROVED]
        with logfire.span(
            "comment_service.list_comments",
            page_id=str(page_id),
            statuses=[s.value for s in statuses],
        ):
            comments = await self.comment_repository.find_by_page(
                page_id=page_id, statuses=statuses
            )
            logfire.info(
                "Comments retrieved for page", page_id=str(page_id), count=len(comments)
            )
            return comments

    async def list_site_comments(
        self,
        site_id: SiteId,
        status: CommentStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """List comments across a site, newest first (dashboard queue)."""
        with logfire.span(
            "comment_service.list_site_comments",
            site_id=str(site_id),
            status=status.value if status else None,
        ):
            return await self.comment_repository.find_by_site(
                site_id=site_id, status=status, limit=limit, offset=offset
            )

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def edit_comment(
        self, comment_id: CommentId, editor_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment. Only its author may edit it.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the editor is not the comment's author
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            editor_id=str(editor_id),
            content_length=len(content),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_user_id != editor_id:
                logfire.warn(
                    "Edit attempted by non-author",
                    comment_id=str(comment_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(editor_id))

            updated = await self.comment_repository.update_content(comment_id, content)
            if not updated:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment edited", comment_id=str(comment_id))
            return updated

    async def count_by_status(
        self, site_id: SiteId | None = None
    ) -> dict[CommentStatus, int]:
        """Count comments per status, for one site or globally."""
        with logfire.span(
            "comment_service.count_by_status",
            site_id=str(site_id) if site_id else None,
        ):
            return await self.comment_repository.count_by_status(site_id)
