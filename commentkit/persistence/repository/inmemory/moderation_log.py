"""In-memory moderation log repository for testing."""

from commentkit.domain.model.moderation_log import ModerationLogEntry
from commentkit.domain.repository.moderation_log import ModerationLogRepository
from commentkit.domain.value import ModerationLogId, SiteId

from .store import InMemoryStore


class InMemoryModerationLogRepository(ModerationLogRepository):
    """In-memory implementation of ModerationLogRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def append(self, entry: ModerationLogEntry) -> ModerationLogEntry:
        entry = entry.model_copy(
            update={"id": ModerationLogId(self._store.next_id("moderation_log"))}
        )
        self._store.moderation_log[entry.id] = entry
        return entry

    async def find_by_site(
        self, site_id: SiteId, limit: int = 50, offset: int = 0
    ) -> list[ModerationLogEntry]:
        entries = [e for e in self._store.moderation_log.values() if e.site_id == site_id]
        entries.sort(key=lambda e: (e.created_at, e.id), reverse=True)
        return entries[offset : offset + limit]
