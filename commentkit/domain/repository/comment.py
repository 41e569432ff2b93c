"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentkit.domain.model.comment import Comment
from commentkit.domain.value import CommentId, CommentStatus, PageId, SiteId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        """Find all comments whose id is in the given list.

        Unknown ids are skipped silently.
        """
        pass

    @abstractmethod
    async def find_by_page(
        self,
        page_id: PageId,
        statuses: Optional[List[CommentStatus]] = None,
    ) -> List[Comment]:
        """Find comments on a page, oldest first.

        Args:
            page_id: The page ID
            statuses: Only return comments in these statuses (None means all)

        Returns:
            List of comments ordered by created_at ascending, id as tiebreak
        """
        pass

    @abstractmethod
    async def find_by_site(
        self,
        site_id: SiteId,
        status: Optional[CommentStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all pages of a site, newest first.

        Used by the dashboard moderation queue and activity feed.
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Returns:
            The saved comment with its id assigned
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a comment.

        Returns:
            Updated comment, or None if the id does not exist
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace comment content and mark it as edited.

        Returns:
            Updated comment, or None if the id does not exist
        """
        pass

    @abstractmethod
    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        """Store the denormalised like total of a comment."""
        pass

    @abstractmethod
    async def count_by_status(
        self, site_id: Optional[SiteId] = None
    ) -> dict[CommentStatus, int]:
        """Count comments grouped by status.

        Args:
            site_id: Restrict to one site (None counts every site)

        Returns:
            Mapping with an entry for every status, zero when absent
        """
        pass
