"""Magic link repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from commentkit.domain.model.magic_link import MagicLink


class MagicLinkRepository(ABC):
    """Repository for single-use login tokens."""

    @abstractmethod
    async def save(self, link: MagicLink) -> MagicLink:
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[MagicLink]:
        pass

    @abstractmethod
    async def mark_used(self, token: str) -> bool:
        """Mark a token as used.

        Returns:
            True if an unused token was consumed, False otherwise
        """
        pass
