"""PostgreSQL implementation of MagicLink repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import MagicLink
from commentkit.domain.repository import MagicLinkRepository
from commentkit.persistence.mappers import magic_link_to_dict, row_to_magic_link
from commentkit.persistence.tables import magic_links_table


class PostgresMagicLinkRepository(MagicLinkRepository):
    """PostgreSQL implementation of MagicLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, link: MagicLink) -> MagicLink:
        stmt = (
            magic_links_table.insert()
            .values(**magic_link_to_dict(link))
            .returning(magic_links_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_magic_link(dict(result.mappings().one()))

    async def find_by_token(self, token: str) -> Optional[MagicLink]:
        stmt = select(magic_links_table).where(magic_links_table.c.token == token)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_magic_link(dict(row)) if row else None

    async def mark_used(self, token: str) -> bool:
        """Consume a token with a conditional update so it can only be used once."""
        stmt = (
            magic_links_table.update()
            .where(magic_links_table.c.token == token)
            .where(magic_links_table.c.used.is_(False))
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
