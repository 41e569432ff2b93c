"""Domain model entities for CommentKit."""

from commentkit.domain.model.comment import Comment
from commentkit.domain.model.like import Like
from commentkit.domain.model.magic_link import MagicLink
from commentkit.domain.model.moderation_log import ModerationLogEntry
from commentkit.domain.model.page import Page, PageSummary
from commentkit.domain.model.site import Site
from commentkit.domain.model.user import User

__all__ = [
    "User",
    "Site",
    "Page",
    "PageSummary",
    "Comment",
    "Like",
    "MagicLink",
    "ModerationLogEntry",
]
