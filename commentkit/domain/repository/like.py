"""Like repository interface."""

from abc import ABC, abstractmethod

from commentkit.domain.model.like import Like
from commentkit.domain.value import LikeSubject, LikeTarget, SiteId


class LikeRepository(ABC):
    """Repository for Like entity.

    At most one like exists per (target_kind, target_id, subject).
    """

    @abstractmethod
    async def exists(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        pass

    @abstractmethod
    async def add(self, like: Like) -> bool:
        """Insert a like unless one already exists.

        Returns:
            True if a row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> bool:
        """Delete a like.

        Returns:
            True if a row was deleted, False if there was none
        """
        pass

    @abstractmethod
    async def count(self, target_kind: LikeTarget, target_id: int) -> int:
        pass

    @abstractmethod
    async def find_liked_targets(
        self, target_kind: LikeTarget, target_ids: list[int], subject: LikeSubject
    ) -> set[int]:
        """Return the subset of target_ids the subject has liked."""
        pass

    @abstractmethod
    async def count_by_site(self, site_id: SiteId) -> int:
        """Count every like on pages and comments of a site."""
        pass
