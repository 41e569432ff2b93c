"""PostgreSQL implementation of Site repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.error import ConflictError
from commentkit.domain.model import Site
from commentkit.domain.repository import SiteRepository
from commentkit.domain.value import Domain, SiteId, UserId
from commentkit.persistence.mappers import row_to_site, site_to_dict
from commentkit.persistence.tables import sites_table


class PostgresSiteRepository(SiteRepository):
    """PostgreSQL implementation of SiteRepository.

    Pages, comments, likes and moderation log rows are removed by
    ON DELETE CASCADE when a site is deleted.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        stmt = select(sites_table).where(sites_table.c.id == site_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_site(dict(row)) if row else None

    async def find_by_domain(self, domain: Domain) -> Optional[Site]:
        stmt = select(sites_table).where(sites_table.c.domain == domain.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_site(dict(row)) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[Site]:
        stmt = (
            select(sites_table)
            .where(sites_table.c.owner_id == owner_id)
            .order_by(sites_table.c.created_at, sites_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_site(dict(row)) for row in result.mappings().all()]

    async def save(self, site: Site) -> Site:
        """Insert or update a site; a duplicate domain raises ConflictError."""
        values = site_to_dict(site)
        if site.id is None:
            stmt = sites_table.insert().values(**values).returning(sites_table)
        else:
            stmt = (
                sites_table.update()
                .where(sites_table.c.id == site.id)
                .values(**values)
                .returning(sites_table)
            )

        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError("Domain already registered") from e

        return row_to_site(dict(result.mappings().one()))

    async def delete(self, site_id: SiteId) -> bool:
        stmt = sites_table.delete().where(sites_table.c.id == site_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(sites_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
