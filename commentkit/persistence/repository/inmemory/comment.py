"""In-memory comment repository for testing."""

from typing import Optional

from commentkit.domain.model.comment import Comment
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository.comment import CommentRepository
from commentkit.domain.value import CommentId, CommentStatus, PageId, SiteId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_ids(self, comment_ids: list[CommentId]) -> list[Comment]:
        return [
            self._store.comments[i] for i in comment_ids if i in self._store.comments
        ]

    async def find_by_page(
        self,
        page_id: PageId,
        statuses: Optional[list[CommentStatus]] = None,
    ) -> list[Comment]:
        """Find comments on a page, oldest first."""
        comments = [c for c in self._store.comments.values() if c.page_id == page_id]

        if statuses:
            comments = [c for c in comments if c.status in statuses]

        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def find_by_site(
        self,
        site_id: SiteId,
        status: Optional[CommentStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments across a site, newest first."""
        comments = [c for c in self._store.comments.values() if c.site_id == site_id]

        if status is not None:
            comments = [c for c in comments if c.status == status]

        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, assigning the next id."""
        comment = comment.model_copy(
            update={"id": CommentId(self._store.next_id("comments"))}
        )
        self._store.comments[comment.id] = comment
        return comment

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        return self._update(comment_id, status=status, updated_at=utcnow())

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        return self._update(
            comment_id, content=content, is_edited=True, updated_at=utcnow()
        )

    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        self._update(comment_id, like_count=like_count)

    async def count_by_status(
        self, site_id: Optional[SiteId] = None
    ) -> dict[CommentStatus, int]:
        counts = {status: 0 for status in CommentStatus}
        for comment in self._store.comments.values():
            if site_id is None or comment.site_id == site_id:
                counts[comment.status] += 1
        return counts

    def _update(self, comment_id: CommentId, **fields) -> Optional[Comment]:
        # Comments are immutable, so replace the stored row with a copy
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update=fields)
        self._store.comments[comment_id] = updated
        return updated
