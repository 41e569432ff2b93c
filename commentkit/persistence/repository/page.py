"""PostgreSQL implementation of Page repository."""

from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import Page, PageSummary
from commentkit.domain.repository import PageRepository
from commentkit.domain.value import PageId, PageSlug, SiteId
from commentkit.persistence.mappers import page_to_dict, row_to_page
from commentkit.persistence.tables import comments_table, pages_table


class PostgresPageRepository(PageRepository):
    """PostgreSQL implementation of PageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        stmt = select(pages_table).where(pages_table.c.id == page_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def find_by_slug(self, site_id: SiteId, slug: PageSlug) -> Optional[Page]:
        stmt = (
            select(pages_table)
            .where(pages_table.c.site_id == site_id)
            .where(pages_table.c.slug == slug.root)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def save(self, page: Page) -> Page:
        """Insert a page, returning the existing row on a (site, slug) race."""
        stmt = (
            insert(pages_table)
            .values(**page_to_dict(page))
            .on_conflict_do_nothing(constraint="uq_pages_site_slug")
            .returning(pages_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.mappings().first()
        if row:
            return row_to_page(dict(row))

        existing = await self.find_by_slug(page.site_id, page.slug)
        if existing is None:
            raise RuntimeError("Page insert conflicted but no row was found")
        return existing

    async def list_summaries(self, site_id: SiteId) -> List[PageSummary]:
        """Pages with counts aggregated from comment rows in one query."""
        comment_count = func.count(comments_table.c.id)
        pending_count = func.count(
            case((comments_table.c.status == "pending", comments_table.c.id))
        )
        latest = func.max(comments_table.c.created_at)

        stmt = (
            select(
                pages_table,
                comment_count.label("comment_count"),
                pending_count.label("pending_count"),
                latest.label("latest_comment_at"),
            )
            .select_from(
                pages_table.outerjoin(
                    comments_table, comments_table.c.page_id == pages_table.c.id
                )
            )
            .where(pages_table.c.site_id == site_id)
            .group_by(pages_table.c.id)
            .order_by(latest.desc().nulls_last(), pages_table.c.id)
        )
        result = await self.session.execute(stmt)

        return [
            PageSummary(
                page=row_to_page(dict(row)),
                comment_count=row["comment_count"],
                pending_count=row["pending_count"],
                latest_comment_at=row["latest_comment_at"],
            )
            for row in result.mappings().all()
        ]

    async def count(self, site_id: Optional[SiteId] = None) -> int:
        stmt = select(func.count()).select_from(pages_table)
        if site_id is not None:
            stmt = stmt.where(pages_table.c.site_id == site_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
