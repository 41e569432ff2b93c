"""Unit tests for the like use cases."""

import pytest

from commentkit.application.usecase.like import (
    GetLikesRequest,
    GetLikesUseCase,
    SetLikeRequest,
    SetLikeUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from commentkit.domain.error import NotFoundError
from commentkit.domain.value import LikeTarget
from tests.conftest import make_page, make_site, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSetLikeUseCase:
    @pytest.mark.asyncio
    async def test_like_is_idempotent(self, unit_env):
        # Arrange
        set_like = await unit_env.get(SetLikeUseCase)
        user = await make_user(unit_env)
        page = await make_page(unit_env, await make_site(unit_env, user))
        request = SetLikeRequest(
            target_kind=LikeTarget.PAGE, target_id=page.id, user_id=user.id
        )

        # Act
        await set_like.execute(request)
        response = await set_like.execute(request)

        # Assert
        assert response.total_likes == 1
        assert response.user_liked is True

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unit_env):
        set_like = await unit_env.get(SetLikeUseCase)
        user = await make_user(unit_env)
        page = await make_page(unit_env, await make_site(unit_env, user))

        response = await set_like.execute(
            SetLikeRequest(
                target_kind=LikeTarget.PAGE,
                target_id=page.id,
                user_id=user.id,
                liked=False,
            )
        )

        assert response.total_likes == 0
        assert response.user_liked is False

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        set_like = await unit_env.get(SetLikeUseCase)
        user = await make_user(unit_env)

        with pytest.raises(NotFoundError):
            await set_like.execute(
                SetLikeRequest(
                    target_kind=LikeTarget.COMMENT, target_id=999, user_id=user.id
                )
            )


class TestToggleAndGetLikes:
    @pytest.mark.asyncio
    async def test_toggle_twice(self, unit_env):
        toggle = await unit_env.get(ToggleLikeUseCase)
        user = await make_user(unit_env)
        page = await make_page(unit_env, await make_site(unit_env, user))
        request = ToggleLikeRequest(
            target_kind=LikeTarget.PAGE, target_id=page.id, user_id=user.id
        )

        first = await toggle.execute(request)
        second = await toggle.execute(request)

        assert (first.liked, first.total_likes) == (True, 1)
        assert (second.liked, second.total_likes) == (False, 0)

    @pytest.mark.asyncio
    async def test_counts_per_viewer(self, unit_env):
        set_like = await unit_env.get(SetLikeUseCase)
        get_likes = await unit_env.get(GetLikesUseCase)
        alice = await make_user(unit_env)
        bob = await make_user(unit_env, email="bob@example.com")
        page = await make_page(unit_env, await make_site(unit_env, alice))
        await set_like.execute(
            SetLikeRequest(target_kind=LikeTarget.PAGE, target_id=page.id, user_id=alice.id)
        )

        as_bob = await get_likes.execute(
            GetLikesRequest(target_kind=LikeTarget.PAGE, target_id=page.id, user_id=bob.id)
        )
        anonymous = await get_likes.execute(
            GetLikesRequest(target_kind=LikeTarget.PAGE, target_id=page.id)
        )

        assert as_bob.total_likes == 1
        assert as_bob.user_liked is False
        assert anonymous.total_likes == 1
