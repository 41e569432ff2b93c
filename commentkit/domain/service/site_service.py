"""Site domain service."""

import secrets
from dataclasses import dataclass
from typing import Any

import logfire

from commentkit.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from commentkit.domain.model import Site
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository import (
    CommentRepository,
    LikeRepository,
    PageRepository,
    SiteRepository,
)
from commentkit.domain.value import CommentStatus, Domain, SiteId, UserId

from .base import Service


class DomainVerifier:
    """Checks that a site owner controls the site's domain."""

    async def verify(self, domain: Domain, token: str) -> bool:
        """Return True if the domain publishes the expected verification token.

        Args:
            domain: Domain to check
            token: Site's verification token
        """
        raise NotImplementedError


@dataclass
class SiteStats:
    """Counts derived from a site's rows."""

    total_pages: int
    total_comments: int
    pending_comments: int
    total_likes: int


def generate_api_key() -> str:
    return secrets.token_urlsafe(32)


def generate_verification_token() -> str:
    return f"commentkit-verify-{secrets.token_hex(16)}"


class SiteService(Service):
    """Domain service for site operations."""

    def __init__(
        self,
        site_repository: SiteRepository,
        page_repository: PageRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        domain_verifier: DomainVerifier,
    ) -> None:
        self.site_repository = site_repository
        self.page_repository = page_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.domain_verifier = domain_verifier

    async def create_site(self, owner_id: UserId, name: str, domain: Domain) -> Site:
        """Register a new site.

        Raises:
            ConflictError: If the domain is already registered
        """
        with logfire.span(
            "site_service.create_site", owner_id=str(owner_id), domain=domain.root
        ):
            if await self.site_repository.find_by_domain(domain):
                logfire.warn("Duplicate site domain", domain=domain.root)
                raise ConflictError("Domain already registered")

            site = await self.site_repository.save(
                Site(
                    name=name,
                    domain=domain,
                    api_key=generate_api_key(),
                    owner_id=owner_id,
                    verification_token=generate_verification_token(),
                )
            )
            logfire.info("Site created", site_id=str(site.id), domain=domain.root)
            return site

    async def get_site_by_domain(self, domain: Domain) -> Site:
        """Get a site by its domain.

        Raises:
            NotFoundError: If no site uses the domain
        """
        with logfire.span("site_service.get_site_by_domain", domain=domain.root):
            site = await self.site_repository.find_by_domain(domain)
            if not site:
                logfire.warn("Site not found", domain=domain.root)
                raise NotFoundError("Site", domain.root)
            return site

    async def find_site_by_domain(self, domain: Domain) -> Site | None:
        return await self.site_repository.find_by_domain(domain)

    async def get_site(self, site_id: SiteId) -> Site:
        """Get a site by ID.

        Raises:
            NotFoundError: If the site does not exist
        """
        site = await self.site_repository.find_by_id(site_id)
        if not site:
            raise NotFoundError("Site", str(site_id))
        return site

    async def get_owned_site(self, site_id: SiteId, user_id: UserId) -> Site:
        """Get a site and check that the user owns it.

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user is not the owner
        """
        with logfire.span(
            "site_service.get_owned_site", site_id=str(site_id), user_id=str(user_id)
        ):
            site = await self.get_site(site_id)
            if not site.is_owned_by(user_id):
                logfire.warn(
                    "Site access by non-owner", site_id=str(site_id), user_id=str(user_id)
                )
                raise NotAuthorizedError("site", str(site_id), str(user_id))
            return site

    async def list_sites(self, owner_id: UserId) -> list[Site]:
        with logfire.span("site_service.list_sites", owner_id=str(owner_id)):
            return await self.site_repository.find_by_owner(owner_id)

    async def update_site(
        self,
        site: Site,
        name: str | None = None,
        domain: Domain | None = None,
        settings: dict[str, Any] | None = None,
    ) -> Site:
        """Update name, domain or settings of a site.

        Changing the domain resets verification.

        Raises:
            ConflictError: If the new domain is used by another site
        """
        with logfire.span("site_service.update_site", site_id=str(site.id)):
            update: dict[str, Any] = {"updated_at": utcnow()}
            if name is not None:
                update["name"] = name
            if settings is not None:
                update["settings"] = settings
            if domain is not None and domain != site.domain:
                existing = await self.site_repository.find_by_domain(domain)
                if existing and existing.id != site.id:
                    raise ConflictError("Domain already registered")
                update.update(domain=domain, verified=False, verified_at=None)

            saved = await self.site_repository.save(site.model_copy(update=update))
            logfire.info("Site updated", site_id=str(site.id), fields=sorted(update))
            return saved

    async def delete_site(self, site: Site) -> None:
        """Delete a site with its pages, comments and likes."""
        with logfire.span("site_service.delete_site", site_id=str(site.id)):
            if site.id is None or not await self.site_repository.delete(site.id):
                raise NotFoundError("Site", str(site.id))
            logfire.info("Site deleted", site_id=str(site.id))

    async def regenerate_api_key(self, site: Site) -> Site:
        with logfire.span("site_service.regenerate_api_key", site_id=str(site.id)):
            saved = await self.site_repository.save(
                site.model_copy(update={"api_key": generate_api_key(), "updated_at": utcnow()})
            )
            logfire.info("Site API key regenerated", site_id=str(site.id))
            return saved

    async def get_stats(self, site_id: SiteId) -> SiteStats:
        """Page, comment and like counts of a site."""
        with logfire.span("site_service.get_stats", site_id=str(site_id)):
            by_status = await self.comment_repository.count_by_status(site_id)
            return SiteStats(
                total_pages=await self.page_repository.count(site_id),
                total_comments=sum(by_status.values()),
                pending_comments=by_status.get(CommentStatus.PENDING, 0),
                total_likes=await self.like_repository.count_by_site(site_id),
            )

    async def verify_site(self, site: Site) -> Site:
        """Check domain ownership and mark the site verified on success.

        Returns:
            The site, verified if the check passed, unchanged otherwise
        """
        with logfire.span(
            "site_service.verify_site", site_id=str(site.id), domain=site.domain.root
        ):
            if site.verified:
                return site

            if not await self.domain_verifier.verify(site.domain, site.verification_token):
                logfire.warn("Domain verification failed", domain=site.domain.root)
                return site

            now = utcnow()
            saved = await self.site_repository.save(
                site.model_copy(update={"verified": True, "verified_at": now, "updated_at": now})
            )
            logfire.info("Site verified", site_id=str(site.id), domain=site.domain.root)
            return saved

    async def count(self) -> int:
        return await self.site_repository.count()
