"""Unit tests for the site moderation queue use cases."""

import pytest

from commentkit.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from commentkit.application.usecase.site import (
    BulkModerateRequest,
    BulkModerateUseCase,
    GetModerationLogRequest,
    GetModerationLogUseCase,
    GetSiteActivityRequest,
    GetSiteActivityUseCase,
    ListSiteCommentsRequest,
    ListSiteCommentsUseCase,
    ListSitePagesRequest,
    ListSitePagesUseCase,
)
from commentkit.domain.error import NotAuthorizedError
from commentkit.domain.repository import CommentRepository
from commentkit.domain.value import BulkOutcome, CommentStatus, ModerationAction
from tests.conftest import make_site, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def post_guest(env, domain="blog.example.com", page_id="/posts/hello", content="hi"):
    create_comment = await env.get(CreateCommentUseCase)
    return await create_comment.execute(
        CreateCommentRequest(
            domain=domain, page_id=page_id, content=content, author_name="Guest"
        )
    )


class TestBulkModerateUseCase:
    @pytest.mark.asyncio
    async def test_mixed_ids_reported_per_id(self, unit_env):
        # Arrange
        bulk = await unit_env.get(BulkModerateUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = await make_user(unit_env)
        other = await make_user(unit_env, email="bob@example.com")
        site = await make_site(unit_env, owner)
        await make_site(unit_env, other, domain="other.example.com")
        first = await post_guest(unit_env)
        second = await post_guest(unit_env, content="second")
        foreign = await post_guest(unit_env, domain="other.example.com")

        # Act
        response = await bulk.execute(
            BulkModerateRequest(
                site_id=site.id,
                user_id=owner.id,
                comment_ids=[first.id, second.id, 999, foreign.id],
                action=ModerationAction.APPROVE,
            )
        )

        # Assert
        assert response.results == {
            first.id: BulkOutcome.OK,
            second.id: BulkOutcome.OK,
            999: BulkOutcome.NOT_FOUND,
            foreign.id: BulkOutcome.FORBIDDEN,
        }
        assert response.succeeded == 2
        assert response.failed == 2
        assert (await comment_repo.find_by_id(first.id)).status == CommentStatus.APPROVED
        assert (await comment_repo.find_by_id(foreign.id)).status == CommentStatus.PENDING

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, unit_env):
        bulk = await unit_env.get(BulkModerateUseCase)
        owner = await make_user(unit_env)
        other = await make_user(unit_env, email="bob@example.com")
        site = await make_site(unit_env, owner)
        item = await post_guest(unit_env)

        with pytest.raises(NotAuthorizedError):
            await bulk.execute(
                BulkModerateRequest(
                    site_id=site.id,
                    user_id=other.id,
                    comment_ids=[item.id],
                    action=ModerationAction.SPAM,
                )
            )

    def test_empty_id_list_rejected(self):
        with pytest.raises(ValueError):
            BulkModerateRequest(
                site_id=1, user_id=1, comment_ids=[], action=ModerationAction.REJECT
            )


class TestModerationLog:
    @pytest.mark.asyncio
    async def test_log_records_transitions(self, unit_env):
        bulk = await unit_env.get(BulkModerateUseCase)
        get_log = await unit_env.get(GetModerationLogUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        item = await post_guest(unit_env)

        await bulk.execute(
            BulkModerateRequest(
                site_id=site.id,
                user_id=owner.id,
                comment_ids=[item.id],
                action=ModerationAction.REJECT,
            )
        )
        response = await get_log.execute(
            GetModerationLogRequest(site_id=site.id, user_id=owner.id)
        )

        assert len(response.entries) == 1
        entry = response.entries[0]
        assert entry.comment_id == item.id
        assert entry.from_status == CommentStatus.PENDING
        assert entry.to_status == CommentStatus.REJECTED
        assert entry.actor_id == owner.id


class TestGetSiteActivityUseCase:
    @pytest.mark.asyncio
    async def test_merges_comments_and_moderation(self, unit_env):
        bulk = await unit_env.get(BulkModerateUseCase)
        activity = await unit_env.get(GetSiteActivityUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        first = await post_guest(unit_env)
        await post_guest(unit_env, content="second")
        await bulk.execute(
            BulkModerateRequest(
                site_id=site.id,
                user_id=owner.id,
                comment_ids=[first.id],
                action=ModerationAction.APPROVE,
            )
        )

        response = await activity.execute(
            GetSiteActivityRequest(site_id=site.id, user_id=owner.id)
        )

        kinds = sorted(item.type for item in response.activity)
        assert kinds == ["comment", "comment", "moderation"]
        timestamps = [item.created_at for item in response.activity]
        assert timestamps == sorted(timestamps, reverse=True)

    @pytest.mark.asyncio
    async def test_limit_truncates_feed(self, unit_env):
        activity = await unit_env.get(GetSiteActivityUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        for i in range(3):
            await post_guest(unit_env, content=f"comment {i}")

        response = await activity.execute(
            GetSiteActivityRequest(site_id=site.id, user_id=owner.id, limit=2)
        )

        assert len(response.activity) == 2


class TestListSitePagesUseCase:
    @pytest.mark.asyncio
    async def test_pages_with_counts_and_window(self, unit_env):
        list_pages = await unit_env.get(ListSitePagesUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        await post_guest(unit_env, page_id="/a")
        await post_guest(unit_env, page_id="/a", content="again")
        await post_guest(unit_env, page_id="/b")

        everything = await list_pages.execute(
            ListSitePagesRequest(site_id=site.id, user_id=owner.id)
        )
        window = await list_pages.execute(
            ListSitePagesRequest(site_id=site.id, user_id=owner.id, limit=1, offset=1)
        )

        assert everything.total == 2
        by_slug = {p.slug: p for p in everything.pages}
        assert by_slug["/a"].comment_count == 2
        assert by_slug["/a"].pending_count == 2
        assert len(window.pages) == 1
        assert window.total == 2


class TestListSiteCommentsUseCase:
    @pytest.mark.asyncio
    async def test_filter_by_status(self, unit_env):
        bulk = await unit_env.get(BulkModerateUseCase)
        list_comments = await unit_env.get(ListSiteCommentsUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        first = await post_guest(unit_env)
        await post_guest(unit_env, content="second")
        await bulk.execute(
            BulkModerateRequest(
                site_id=site.id,
                user_id=owner.id,
                comment_ids=[first.id],
                action=ModerationAction.SPAM,
            )
        )

        pending = await list_comments.execute(
            ListSiteCommentsRequest(
                site_id=site.id, user_id=owner.id, status=CommentStatus.PENDING
            )
        )
        every = await list_comments.execute(
            ListSiteCommentsRequest(site_id=site.id, user_id=owner.id)
        )

        assert [c.content for c in pending.comments] == ["second"]
        assert pending.total == 1
        assert every.total == 2
