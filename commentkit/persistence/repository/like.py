"""PostgreSQL implementation of Like repository."""

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import Like
from commentkit.domain.repository import LikeRepository
from commentkit.domain.value import LikeSubject, LikeTarget, SiteId
from commentkit.persistence.mappers import like_to_dict
from commentkit.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Idempotency relies on the uq_likes_target_subject constraint.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _target(self, target_kind: LikeTarget, target_id: int):
        return (likes_table.c.target_kind == target_kind.value) & (
            likes_table.c.target_id == target_id
        )

    async def exists(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        stmt = select(likes_table.c.id).where(
            self._target(target_kind, target_id),
            likes_table.c.subject == subject.root,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, like: Like) -> bool:
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="uq_likes_target_subject")
            .returning(likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None

    async def remove(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        stmt = likes_table.delete().where(
            self._target(target_kind, target_id),
            likes_table.c.subject == subject.root,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count(self, target_kind: LikeTarget, target_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(self._target(target_kind, target_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_liked_targets(
        self, target_kind: LikeTarget, target_ids: list[int], subject: LikeSubject
    ) -> set[int]:
        if not target_ids:
            return set()
        stmt = select(likes_table.c.target_id).where(
            likes_table.c.target_kind == target_kind.value,
            likes_table.c.target_id.in_(target_ids),
            likes_table.c.subject == subject.root,
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def count_by_site(self, site_id: SiteId) -> int:
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.site_id == site_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
