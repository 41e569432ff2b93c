"""Unit tests for the initial status of new comments."""

from commentkit.config import ModerationSettings
from commentkit.domain.model import Site
from commentkit.domain.service import initial_status
from commentkit.domain.value import (
    CommentStatus,
    Domain,
    Email,
    GuestAuthor,
    SiteId,
    UserAuthor,
    UserId,
)


def site(settings: dict | None = None) -> Site:
    return Site(
        id=SiteId(1),
        name="Blog",
        domain=Domain("blog.example.com"),
        api_key="key",
        owner_id=UserId(1),
        verification_token="token",
        settings=settings or {},
    )


def user_author(user_id: int) -> UserAuthor:
    return UserAuthor(user_id=UserId(user_id), display_name="someone")


class TestInitialStatus:
    def test_guest_always_pending(self):
        settings = ModerationSettings(auto_approve_authenticated=True)

        status = initial_status(site(), GuestAuthor(name="guest"), None, settings)

        assert status == CommentStatus.PENDING

    def test_owner_approved(self):
        status = initial_status(
            site(), user_author(1), Email("owner@example.com"), ModerationSettings()
        )

        assert status == CommentStatus.APPROVED

    def test_other_user_pending_by_default(self):
        status = initial_status(
            site(), user_author(2), Email("reader@example.com"), ModerationSettings()
        )

        assert status == CommentStatus.PENDING

    def test_globally_trusted_email(self):
        settings = ModerationSettings(trusted_emails=["Reader@Example.com"])

        status = initial_status(site(), user_author(2), Email("reader@example.com"), settings)

        assert status == CommentStatus.APPROVED

    def test_site_trusted_email(self):
        trusted_site = site({"trusted_emails": ["reader@example.com"]})

        status = initial_status(
            trusted_site, user_author(2), Email("reader@example.com"), ModerationSettings()
        )

        assert status == CommentStatus.APPROVED

    def test_auto_approve_authenticated(self):
        settings = ModerationSettings(auto_approve_authenticated=True)

        status = initial_status(site(), user_author(2), None, settings)

        assert status == CommentStatus.APPROVED
