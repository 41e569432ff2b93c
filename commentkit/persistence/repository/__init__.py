"""PostgreSQL repository implementations."""

from commentkit.persistence.repository.comment import PostgresCommentRepository
from commentkit.persistence.repository.like import PostgresLikeRepository
from commentkit.persistence.repository.magic_link import PostgresMagicLinkRepository
from commentkit.persistence.repository.moderation_log import (
    PostgresModerationLogRepository,
)
from commentkit.persistence.repository.page import PostgresPageRepository
from commentkit.persistence.repository.site import PostgresSiteRepository
from commentkit.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresMagicLinkRepository",
    "PostgresSiteRepository",
    "PostgresPageRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresModerationLogRepository",
]
