"""Unit tests for IdentityResolver."""

import pytest

from commentkit.config import ModerationSettings
from commentkit.domain.error import ValidationError
from commentkit.domain.model import User
from commentkit.domain.service import IdentityResolver
from commentkit.domain.value import Email, GuestAuthor, UserAuthor, UserId


@pytest.fixture
def resolver():
    return IdentityResolver(ModerationSettings(max_content_length=50, max_author_name_length=10))


@pytest.fixture
def user():
    return User(id=UserId(7), email=Email("alice@example.com"), display_name="Alice")


class TestResolve:
    def test_session_user_wins_over_guest_fields(self, resolver, user):
        author = resolver.resolve(user, guest_name="Mallory", guest_email="m@example.com")

        assert isinstance(author, UserAuthor)
        assert author.user_id == 7
        assert author.display_name == "Alice"
        assert author.email_hash == user.email_hash

    def test_user_without_display_name_uses_local_part(self, resolver):
        user = User(id=UserId(8), email=Email("bob@example.com"))

        author = resolver.resolve(user)

        assert author.display_name == "bob"

    def test_guest_requires_name(self, resolver):
        with pytest.raises(ValidationError):
            resolver.resolve(None, guest_name="   ")

    def test_guest_name_too_long(self, resolver):
        with pytest.raises(ValidationError):
            resolver.resolve(None, guest_name="x" * 11)

    def test_guest_email_reduced_to_hash(self, resolver):
        author = resolver.resolve(None, guest_name="Guest", guest_email="Guest@Example.com")

        assert isinstance(author, GuestAuthor)
        assert author.email_hash == Email("guest@example.com").gravatar_hash()
        assert "guest@example.com" not in author.model_dump_json()

    def test_guest_invalid_email_rejected(self, resolver):
        with pytest.raises(ValidationError):
            resolver.resolve(None, guest_name="Guest", guest_email="not-an-email")

    def test_guest_without_email(self, resolver):
        author = resolver.resolve(None, guest_name="Guest")

        assert author.email_hash is None


class TestCleanContent:
    def test_empty_after_sanitising(self, resolver):
        with pytest.raises(ValidationError):
            resolver.clean_content("<script>x</script>")

    def test_none_content(self, resolver):
        with pytest.raises(ValidationError):
            resolver.clean_content(None)

    def test_too_long(self, resolver):
        with pytest.raises(ValidationError):
            resolver.clean_content("x" * 51)

    def test_trimmed(self, resolver):
        assert resolver.clean_content("  hi  ") == "hi"
