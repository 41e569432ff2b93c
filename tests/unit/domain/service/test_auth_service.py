"""Unit tests for AuthService and JWTService."""

from datetime import timedelta

import pytest

from commentkit.config import AuthSettings
from commentkit.domain.error import ValidationError
from commentkit.domain.model import MagicLink
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository import MagicLinkRepository, UserRepository
from commentkit.domain.service import AuthService, EmailSender, JWTService
from commentkit.domain.value import Email, UserId
from commentkit.util.jwt import JWTError
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMagicLink:
    @pytest.mark.asyncio
    async def test_request_sends_link_with_token(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(EmailSender)

        # Act
        link = await auth_service.request_magic_link(
            Email("alice@example.com"), redirect_url="/dashboard"
        )

        # Assert
        assert len(sender.outbox) == 1
        assert sender.outbox[0].to == "alice@example.com"
        assert sender.last_token() == link.token
        assert "redirect=%2Fdashboard" in sender.outbox[0].link_url

    @pytest.mark.asyncio
    async def test_verify_creates_user_once(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        first = await auth_service.request_magic_link(Email("new@example.com"))
        user = await auth_service.verify_magic_link(first.token)
        second = await auth_service.request_magic_link(Email("new@example.com"))
        again = await auth_service.verify_magic_link(second.token)

        assert user.id == again.id
        assert await user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_verify_existing_user(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        existing = await make_user(unit_env, email="alice@example.com")

        link = await auth_service.request_magic_link(Email("alice@example.com"))
        user = await auth_service.verify_magic_link(link.token)

        assert user.id == existing.id

    @pytest.mark.asyncio
    async def test_token_is_single_use(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        link = await auth_service.request_magic_link(Email("alice@example.com"))
        await auth_service.verify_magic_link(link.token)

        with pytest.raises(ValidationError):
            await auth_service.verify_magic_link(link.token)

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        link_repo = await unit_env.get(MagicLinkRepository)
        await link_repo.save(
            MagicLink(
                email=Email("late@example.com"),
                token="expired-token-0123456789",
                expires_at=utcnow() - timedelta(minutes=1),
            )
        )

        with pytest.raises(ValidationError):
            await auth_service.verify_magic_link("expired-token-0123456789")

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.verify_magic_link("does-not-exist")


class TestJWTService:
    def test_round_trip(self):
        jwt_service = JWTService(AuthSettings(jwt_secret="secret"))

        token = jwt_service.create_token(UserId(5), "alice@example.com")

        assert jwt_service.verify_token(token).user_id == 5
        assert jwt_service.get_user_id_from_token(token) == 5

    def test_wrong_secret(self):
        token = JWTService(AuthSettings(jwt_secret="one")).create_token(UserId(5), "a@b.co")

        with pytest.raises(JWTError):
            JWTService(AuthSettings(jwt_secret="two")).verify_token(token)

    def test_expired_token(self):
        jwt_service = JWTService(AuthSettings(jwt_secret="secret", session_days=-1))

        token = jwt_service.create_token(UserId(5), "alice@example.com")

        assert jwt_service.get_user_id_from_token(token) is None

    def test_missing_or_garbage_token(self):
        jwt_service = JWTService(AuthSettings())

        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("garbage") is None
