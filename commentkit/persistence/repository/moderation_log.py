"""PostgreSQL implementation of ModerationLog repository."""

from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import ModerationLogEntry
from commentkit.domain.repository import ModerationLogRepository
from commentkit.domain.value import SiteId
from commentkit.persistence.mappers import (
    moderation_log_entry_to_dict,
    row_to_moderation_log_entry,
)
from commentkit.persistence.tables import moderation_log_table


class PostgresModerationLogRepository(ModerationLogRepository):
    """PostgreSQL implementation of ModerationLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, entry: ModerationLogEntry) -> ModerationLogEntry:
        stmt = (
            moderation_log_table.insert()
            .values(**moderation_log_entry_to_dict(entry))
            .returning(moderation_log_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_moderation_log_entry(dict(result.mappings().one()))

    async def find_by_site(
        self, site_id: SiteId, limit: int = 50, offset: int = 0
    ) -> List[ModerationLogEntry]:
        stmt = (
            select(moderation_log_table)
            .where(moderation_log_table.c.site_id == site_id)
            .order_by(
                desc(moderation_log_table.c.created_at), desc(moderation_log_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_moderation_log_entry(dict(row)) for row in result.mappings().all()]
