"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .magic_link import InMemoryMagicLinkRepository
from .moderation_log import InMemoryModerationLogRepository
from .page import InMemoryPageRepository
from .site import InMemorySiteRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryMagicLinkRepository",
    "InMemoryModerationLogRepository",
    "InMemoryPageRepository",
    "InMemorySiteRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
