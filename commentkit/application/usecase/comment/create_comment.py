"""Create comment use case."""

from pydantic import BaseModel

from commentkit.domain.service import (
    CommentService,
    IdentityResolver,
    PageService,
    SiteService,
    UserService,
)
from commentkit.domain.value import CommentId, Domain, PageSlug, UserId

from .get_page_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    domain: str
    page_id: str
    content: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    parent_id: int | None = None  # Parent comment ID for replies
    page_title: str | None = None
    page_url: str | None = None
    user_id: int | None = None  # From the session cookie, if any


class CreateCommentUseCase:
    """Use case for posting a comment or a reply from the widget."""

    def __init__(
        self,
        site_service: SiteService,
        page_service: PageService,
        comment_service: CommentService,
        user_service: UserService,
        identity_resolver: IdentityResolver,
    ) -> None:
        self.site_service = site_service
        self.page_service = page_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.identity_resolver = identity_resolver

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Validate content and resolve the author (nothing is stored on failure)
        2. Resolve the site and get or create the page
        3. Create the comment; the trust policy picks its initial status

        Raises:
            ValidationError: If content or author fields are invalid
            NotFoundError: If the site or the parent comment does not exist
        """
        content = self.identity_resolver.clean_content(request.content)

        session_user = await self.user_service.find_by_id(
            UserId(request.user_id) if request.user_id else None
        )
        author = self.identity_resolver.resolve(
            session_user, request.author_name, request.author_email
        )

        site = await self.site_service.get_site_by_domain(Domain(request.domain))
        page = await self.page_service.get_or_create(
            site_id=site.id,
            slug=PageSlug(request.page_id),
            title=request.page_title,
            url=request.page_url,
        )

        comment = await self.comment_service.create_comment(
            site=site,
            page=page,
            author=author,
            content=content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
            author_email=session_user.email if session_user else None,
        )
        return CommentItem.from_comment(comment)
