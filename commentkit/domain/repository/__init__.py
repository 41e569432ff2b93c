"""Repository interfaces for the CommentKit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentkit.domain.repository.comment import CommentRepository
from commentkit.domain.repository.like import LikeRepository
from commentkit.domain.repository.magic_link import MagicLinkRepository
from commentkit.domain.repository.moderation_log import ModerationLogRepository
from commentkit.domain.repository.page import PageRepository
from commentkit.domain.repository.site import SiteRepository
from commentkit.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SiteRepository",
    "PageRepository",
    "CommentRepository",
    "LikeRepository",
    "MagicLinkRepository",
    "ModerationLogRepository",
]
