"""In-memory magic link repository for testing."""

from typing import Optional

from commentkit.domain.model.magic_link import MagicLink
from commentkit.domain.repository.magic_link import MagicLinkRepository
from commentkit.domain.value import MagicLinkId

from .store import InMemoryStore


class InMemoryMagicLinkRepository(MagicLinkRepository):
    """In-memory implementation of MagicLinkRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, link: MagicLink) -> MagicLink:
        if link.id is None:
            link = link.model_copy(
                update={"id": MagicLinkId(self._store.next_id("magic_links"))}
            )
        self._store.magic_links[link.id] = link
        return link

    async def find_by_token(self, token: str) -> Optional[MagicLink]:
        for link in self._store.magic_links.values():
            if link.token == token:
                return link
        return None

    async def mark_used(self, token: str) -> bool:
        link = await self.find_by_token(token)
        if link is None or link.used:
            return False
        self._store.magic_links[link.id] = link.model_copy(update={"used": True})
        return True
