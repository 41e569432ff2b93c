"""Moderation log repository interface."""

from abc import ABC, abstractmethod
from typing import List

from commentkit.domain.model.moderation_log import ModerationLogEntry
from commentkit.domain.value import SiteId


class ModerationLogRepository(ABC):
    """Append-only store of moderation transitions."""

    @abstractmethod
    async def append(self, entry: ModerationLogEntry) -> ModerationLogEntry:
        pass

    @abstractmethod
    async def find_by_site(
        self, site_id: SiteId, limit: int = 50, offset: int = 0
    ) -> List[ModerationLogEntry]:
        """Entries for a site, newest first."""
        pass
