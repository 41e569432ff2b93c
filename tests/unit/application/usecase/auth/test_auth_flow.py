"""Unit tests for the magic-link sign-in use cases."""

import pytest

from commentkit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    VerifyMagicLinkRequest,
    VerifyMagicLinkUseCase,
)
from commentkit.application.usecase.auth.login import LINK_SENT_MESSAGE
from commentkit.domain.error import NotFoundError, ValidationError
from commentkit.domain.service import EmailSender, JWTService
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoginAndVerify:
    @pytest.mark.asyncio
    async def test_full_sign_in(self, unit_env):
        # Arrange
        login = await unit_env.get(LoginUseCase)
        verify = await unit_env.get(VerifyMagicLinkUseCase)
        jwt_service = await unit_env.get(JWTService)
        sender = await unit_env.get(EmailSender)

        # Act
        response = await login.execute(LoginRequest(email="New@Example.com"))
        verified = await verify.execute(VerifyMagicLinkRequest(token=sender.last_token()))

        # Assert
        assert response.message == LINK_SENT_MESSAGE
        assert sender.outbox[-1].to == "new@example.com"
        assert verified.user.email == "new@example.com"
        assert jwt_service.verify_token(verified.token).user_id == verified.user.id

    @pytest.mark.asyncio
    async def test_token_is_single_use(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        verify = await unit_env.get(VerifyMagicLinkUseCase)
        sender = await unit_env.get(EmailSender)
        await login.execute(LoginRequest(email="alice@example.com"))
        token = sender.last_token()

        await verify.execute(VerifyMagicLinkRequest(token=token))

        with pytest.raises(ValidationError):
            await verify.execute(VerifyMagicLinkRequest(token=token))

    @pytest.mark.asyncio
    async def test_existing_user_reused(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        verify = await unit_env.get(VerifyMagicLinkUseCase)
        sender = await unit_env.get(EmailSender)
        user = await make_user(unit_env)

        await login.execute(LoginRequest(email="alice@example.com"))
        verified = await verify.execute(VerifyMagicLinkRequest(token=sender.last_token()))

        assert verified.user.id == user.id
        assert verified.user.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        verify = await unit_env.get(VerifyMagicLinkUseCase)

        with pytest.raises(ValidationError):
            await verify.execute(VerifyMagicLinkRequest())

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        sender = await unit_env.get(EmailSender)

        with pytest.raises(ValueError):
            await login.execute(LoginRequest(email="not-an-email"))

        assert sender.outbox == []


class TestProfile:
    @pytest.mark.asyncio
    async def test_get_current_user(self, unit_env):
        get_me = await unit_env.get(GetCurrentUserUseCase)
        user = await make_user(unit_env)

        info = await get_me.execute(GetCurrentUserRequest(user_id=user.id))

        assert info.email == "alice@example.com"
        assert info.is_superadmin is False
        assert len(info.email_hash) == 64

    @pytest.mark.asyncio
    async def test_get_deleted_user(self, unit_env):
        get_me = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await get_me.execute(GetCurrentUserRequest(user_id=999))

    @pytest.mark.asyncio
    async def test_update_display_name(self, unit_env):
        update_profile = await unit_env.get(UpdateProfileUseCase)
        user = await make_user(unit_env)

        info = await update_profile.execute(
            UpdateProfileRequest(user_id=user.id, display_name="Alice B.")
        )

        assert info.display_name == "Alice B."

    def test_blank_display_name_rejected(self):
        with pytest.raises(ValueError):
            UpdateProfileRequest(user_id=1, display_name="")
