"""In-memory like repository for testing."""

from commentkit.domain.model.like import Like
from commentkit.domain.repository.like import LikeRepository
from commentkit.domain.value import LikeId, LikeSubject, LikeTarget, SiteId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _find(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> Like | None:
        for like in self._store.likes.values():
            if (
                like.target_kind == target_kind
                and like.target_id == target_id
                and like.subject == subject
            ):
                return like
        return None

    async def exists(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        return self._find(target_kind, target_id, subject) is not None

    async def add(self, like: Like) -> bool:
        if self._find(like.target_kind, like.target_id, like.subject):
            return False
        like = like.model_copy(update={"id": LikeId(self._store.next_id("likes"))})
        self._store.likes[like.id] = like
        return True

    async def remove(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        like = self._find(target_kind, target_id, subject)
        if like is None:
            return False
        del self._store.likes[like.id]
        return True

    async def count(self, target_kind: LikeTarget, target_id: int) -> int:
        return sum(
            1
            for like in self._store.likes.values()
            if like.target_kind == target_kind and like.target_id == target_id
        )

    async def find_liked_targets(
        self, target_kind: LikeTarget, target_ids: list[int], subject: LikeSubject
    ) -> set[int]:
        wanted = set(target_ids)
        return {
            like.target_id
            for like in self._store.likes.values()
            if like.target_kind == target_kind
            and like.target_id in wanted
            and like.subject == subject
        }

    async def count_by_site(self, site_id: SiteId) -> int:
        return sum(1 for like in self._store.likes.values() if like.site_id == site_id)
