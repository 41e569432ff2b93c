"""Domain value objects for CommentKit."""

from commentkit.domain.value.identifiers import (
    CommentId,
    LikeId,
    MagicLinkId,
    ModerationLogId,
    PageId,
    SiteId,
    UserId,
)
from commentkit.domain.value.types import (
    Author,
    BulkOutcome,
    CommentStatus,
    Domain,
    Email,
    GuestAuthor,
    LikeSubject,
    LikeTarget,
    ModerationAction,
    PageSlug,
    UserAuthor,
)

__all__ = [
    # Identifiers
    "UserId",
    "SiteId",
    "PageId",
    "CommentId",
    "LikeId",
    "MagicLinkId",
    "ModerationLogId",
    # Types
    "Author",
    "UserAuthor",
    "GuestAuthor",
    "BulkOutcome",
    "CommentStatus",
    "Domain",
    "Email",
    "LikeSubject",
    "LikeTarget",
    "ModerationAction",
    "PageSlug",
]
