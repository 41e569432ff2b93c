"""Site repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentkit.domain.model.site import Site
from commentkit.domain.value import Domain, SiteId, UserId


class SiteRepository(ABC):
    """Repository for Site aggregate."""

    @abstractmethod
    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        pass

    @abstractmethod
    async def find_by_domain(self, domain: Domain) -> Optional[Site]:
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Site]:
        """Find all sites owned by a user, oldest first."""
        pass

    @abstractmethod
    async def save(self, site: Site) -> Site:
        """Save a site (create when id is None, otherwise update).

        Raises:
            ConflictError: If another site already uses the domain
        """
        pass

    @abstractmethod
    async def delete(self, site_id: SiteId) -> bool:
        """Delete a site together with its pages, comments and likes.

        Returns:
            True if a site was deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
