"""Comment entity.

Comments hang off a page and form a reply tree through parent_id.
The stored parent may be any comment on the same page; display nesting
is decided by the tree assembler, not by storage.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentkit.domain.model.common import DomainModel, utcnow
from commentkit.domain.value import (
    Author,
    CommentId,
    CommentStatus,
    GuestAuthor,
    PageId,
    SiteId,
    UserAuthor,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Authorship is a tagged union: either a registered user or a guest,
    never both. New comments default to pending until moderated.
    """

    id: Optional[CommentId] = None  # Assigned by the store
    site_id: SiteId
    page_id: PageId
    author: Author
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.PENDING
    like_count: int = Field(default=0, ge=0)
    is_edited: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def author_name(self) -> str:
        if isinstance(self.author, UserAuthor):
            return self.author.display_name
        return self.author.name

    @property
    def author_user_id(self) -> UserId | None:
        if isinstance(self.author, UserAuthor):
            return self.author.user_id
        return None

    @property
    def is_guest(self) -> bool:
        return isinstance(self.author, GuestAuthor)

    @property
    def is_public(self) -> bool:
        return self.status == CommentStatus.APPROVED
