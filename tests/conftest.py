"""Test configuration and shared helpers."""

from dishka import AsyncContainer
from fastapi.testclient import TestClient

from commentkit.domain.model import Page, Site, User
from commentkit.domain.repository import PageRepository, SiteRepository, UserRepository
from commentkit.domain.service import EmailSender, SiteService
from commentkit.domain.value import Domain, Email, PageSlug


async def make_user(
    env: AsyncContainer,
    email: str = "alice@example.com",
    display_name: str | None = "Alice",
    is_superadmin: bool = False,
) -> User:
    """Save a user directly through the repository."""
    user_repo = await env.get(UserRepository)
    return await user_repo.save(
        User(email=Email(email), display_name=display_name, is_superadmin=is_superadmin)
    )


async def make_site(
    env: AsyncContainer,
    owner: User,
    domain: str = "blog.example.com",
    name: str = "Blog",
    verified: bool = True,
    settings: dict | None = None,
) -> Site:
    """Register a site for `owner`, verified unless asked otherwise."""
    site_service = await env.get(SiteService)
    site = await site_service.create_site(owner.id, name, Domain(domain))
    update: dict = {}
    if verified:
        update["verified"] = True
    if settings is not None:
        update["settings"] = settings
    if update:
        site_repo = await env.get(SiteRepository)
        site = await site_repo.save(site.model_copy(update=update))
    return site


async def make_page(env: AsyncContainer, site: Site, slug: str = "/posts/hello") -> Page:
    page_repo = await env.get(PageRepository)
    return await page_repo.save(Page(site_id=site.id, slug=PageSlug(slug), title="Hello"))


def sign_in(client: TestClient, email: str) -> dict[str, str]:
    """Run the magic-link flow over HTTP and return Bearer headers.

    The session cookie set by /verify is dropped so that each call picks
    its user explicitly through the returned headers.
    """
    response = client.post("/api/v1/auth/login", json={"email": email})
    assert response.status_code == 200

    container = client.app.state.dishka_container
    sender = client.portal.call(container.get, EmailSender)
    response = client.get("/api/v1/auth/verify", params={"token": sender.last_token()})
    assert response.status_code == 200

    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['token']}"}
