"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import Comment
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository import CommentRepository
from commentkit.domain.value import CommentId, CommentStatus, PageId, SiteId
from commentkit.persistence.mappers import comment_to_dict, row_to_comment
from commentkit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_page(
        self,
        page_id: PageId,
        statuses: Optional[List[CommentStatus]] = None,
    ) -> List[Comment]:
        """Find comments on a page in creation order."""
        stmt = select(comments_table).where(comments_table.c.page_id == page_id)

        if statuses:
            stmt = stmt.where(comments_table.c.status.in_([s.value for s in statuses]))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_site(
        self,
        site_id: SiteId,
        status: Optional[CommentStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across a site, newest first."""
        stmt = select(comments_table).where(comments_table.c.site_id == site_id)

        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)

        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its generated id."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment(dict(result.mappings().one()))

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set status in a single statement."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(status=status.value, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(content=content, is_edited=True, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(like_count=like_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_status(
        self, site_id: Optional[SiteId] = None
    ) -> dict[CommentStatus, int]:
        """Count comments grouped by status."""
        stmt = select(comments_table.c.status, func.count()).group_by(
            comments_table.c.status
        )
        if site_id is not None:
            stmt = stmt.where(comments_table.c.site_id == site_id)

        result = await self.session.execute(stmt)
        counts = {status: 0 for status in CommentStatus}
        for status, count in result.all():
            counts[CommentStatus(status)] = count
        return counts
