"""In-memory site repository for testing."""

from typing import List, Optional

from commentkit.domain.error import ConflictError
from commentkit.domain.model.site import Site
from commentkit.domain.repository.site import SiteRepository
from commentkit.domain.value import Domain, SiteId, UserId

from .store import InMemoryStore


class InMemorySiteRepository(SiteRepository):
    """In-memory implementation of SiteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        return self._store.sites.get(site_id)

    async def find_by_domain(self, domain: Domain) -> Optional[Site]:
        for site in self._store.sites.values():
            if site.domain == domain:
                return site
        return None

    async def find_by_owner(self, owner_id: UserId) -> List[Site]:
        sites = [s for s in self._store.sites.values() if s.owner_id == owner_id]
        sites.sort(key=lambda s: (s.created_at, s.id))
        return sites

    async def save(self, site: Site) -> Site:
        """Save or update a site, enforcing unique domains."""
        existing = await self.find_by_domain(site.domain)
        if existing and existing.id != site.id:
            raise ConflictError("Domain already registered")

        if site.id is None:
            site = site.model_copy(update={"id": SiteId(self._store.next_id("sites"))})
        self._store.sites[site.id] = site
        return site

    async def delete(self, site_id: SiteId) -> bool:
        return self._store.delete_site(site_id)

    async def count(self) -> int:
        return len(self._store.sites)
