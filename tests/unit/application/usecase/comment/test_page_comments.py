"""Unit tests for the widget comment use cases."""

import pytest

from commentkit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetPageCommentsRequest,
    GetPageCommentsUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)
from commentkit.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from commentkit.domain.repository import CommentRepository, PageRepository
from commentkit.domain.service import LikeService, ModerationService
from commentkit.domain.value import CommentStatus, LikeSubject, LikeTarget, PageSlug
from tests.conftest import make_site, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

DOMAIN = "blog.example.com"
PAGE = "/posts/hello"


def guest_comment(content: str = "Nice post", **overrides) -> CreateCommentRequest:
    fields = {
        "domain": DOMAIN,
        "page_id": PAGE,
        "content": content,
        "author_name": "Guest",
        "author_email": "guest@example.com",
    }
    fields.update(overrides)
    return CreateCommentRequest(**fields)


class TestCreateCommentUseCase:
    @pytest.mark.asyncio
    async def test_guest_comment_pending_and_page_created(self, unit_env):
        # Arrange
        create_comment = await unit_env.get(CreateCommentUseCase)
        page_repo = await unit_env.get(PageRepository)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, domain=DOMAIN)

        # Act
        item = await create_comment.execute(guest_comment(page_title="Hello"))

        # Assert
        assert item.status == CommentStatus.PENDING
        assert item.author_name == "Guest"
        assert item.author_email_hash is not None
        page = await page_repo.find_by_slug(site.id, PageSlug(PAGE))
        assert page is not None
        assert page.title == "Hello"

    @pytest.mark.asyncio
    async def test_session_user_overrides_guest_fields(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)

        item = await create_comment.execute(guest_comment(user_id=owner.id))

        assert item.author_name == "Alice"
        assert item.status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_empty_content_stores_nothing(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, domain=DOMAIN)

        with pytest.raises(ValidationError):
            await create_comment.execute(guest_comment(content="   "))

        assert await comment_repo.find_by_site(site.id) == []

    @pytest.mark.asyncio
    async def test_guest_without_name(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)

        with pytest.raises(ValidationError):
            await create_comment.execute(guest_comment(author_name=None))

    @pytest.mark.asyncio
    async def test_unknown_domain(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create_comment.execute(guest_comment(domain="nowhere.example.com"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("parent_id", [999, 0])
    async def test_reply_to_missing_parent(self, unit_env, parent_id):
        create_comment = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, domain=DOMAIN)

        with pytest.raises(NotFoundError):
            await create_comment.execute(guest_comment(parent_id=parent_id))

        assert await comment_repo.find_by_site(site.id) == []


class TestGetPageCommentsUseCase:
    @pytest.mark.asyncio
    async def test_only_approved_in_tree(self, unit_env):
        # Arrange
        create_comment = await unit_env.get(CreateCommentUseCase)
        moderation = await unit_env.get(ModerationService)
        get_comments = await unit_env.get(GetPageCommentsUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)
        root = await create_comment.execute(guest_comment("root"))
        reply = await create_comment.execute(guest_comment("reply", parent_id=root.id))
        nested = await create_comment.execute(guest_comment("nested", parent_id=reply.id))
        await create_comment.execute(guest_comment("still pending"))
        for item in (root, reply, nested):
            await moderation.update_status(item.id, CommentStatus.APPROVED)

        # Act
        response = await get_comments.execute(
            GetPageCommentsRequest(domain=DOMAIN, page_id=PAGE)
        )

        # Assert
        assert response.comment_count == 3
        assert [c.content for c in response.comments] == ["root"]
        assert [c.content for c in response.comments[0].replies] == ["reply", "nested"]

    @pytest.mark.asyncio
    async def test_first_visit_creates_empty_page(self, unit_env):
        get_comments = await unit_env.get(GetPageCommentsUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)

        response = await get_comments.execute(
            GetPageCommentsRequest(domain=DOMAIN, page_id="/new", title="New")
        )

        assert response.page_id is not None
        assert response.slug == "/new"
        assert response.title == "New"
        assert response.comments == []
        assert response.likes == 0

    @pytest.mark.asyncio
    async def test_like_flags_for_viewer(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetPageCommentsUseCase)
        like_service = await unit_env.get(LikeService)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)
        item = await create_comment.execute(guest_comment(user_id=owner.id))
        subject = LikeSubject.for_user(owner.id)
        await like_service.like(LikeTarget.COMMENT, item.id, subject)

        as_owner = await get_comments.execute(
            GetPageCommentsRequest(domain=DOMAIN, page_id=PAGE, user_id=owner.id)
        )
        anonymous = await get_comments.execute(
            GetPageCommentsRequest(domain=DOMAIN, page_id=PAGE)
        )

        assert as_owner.comments[0].user_liked is True
        assert as_owner.comments[0].likes == 1
        assert anonymous.comments[0].user_liked is False

    @pytest.mark.asyncio
    async def test_unknown_site(self, unit_env):
        get_comments = await unit_env.get(GetPageCommentsUseCase)

        with pytest.raises(NotFoundError):
            await get_comments.execute(
                GetPageCommentsRequest(domain="nowhere.example.com", page_id=PAGE)
            )


class TestUpdateCommentStatusUseCase:
    @pytest.mark.asyncio
    async def test_owner_approves(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        update_status = await unit_env.get(UpdateCommentStatusUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)
        item = await create_comment.execute(guest_comment())

        response = await update_status.execute(
            UpdateCommentStatusRequest(
                comment_id=item.id, status=CommentStatus.APPROVED, user_id=owner.id
            )
        )

        assert response.status == CommentStatus.APPROVED
        assert response.updated is True

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        update_status = await unit_env.get(UpdateCommentStatusUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = await make_user(unit_env)
        intruder = await make_user(unit_env, email="mallory@example.com")
        await make_site(unit_env, owner, domain=DOMAIN)
        item = await create_comment.execute(guest_comment())

        with pytest.raises(NotAuthorizedError):
            await update_status.execute(
                UpdateCommentStatusRequest(
                    comment_id=item.id, status=CommentStatus.SPAM, user_id=intruder.id
                )
            )

        assert (await comment_repo.find_by_id(item.id)).status == CommentStatus.PENDING

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        update_status = await unit_env.get(UpdateCommentStatusUseCase)

        with pytest.raises(NotFoundError):
            await update_status.execute(
                UpdateCommentStatusRequest(
                    comment_id=999, status=CommentStatus.APPROVED, user_id=1
                )
            )


class TestEditCommentUseCase:
    @pytest.mark.asyncio
    async def test_author_edits(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        edit_comment = await unit_env.get(EditCommentUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)
        item = await create_comment.execute(guest_comment(user_id=owner.id))

        edited = await edit_comment.execute(
            EditCommentRequest(comment_id=item.id, user_id=owner.id, content=" Better ")
        )

        assert edited.content == "Better"
        assert edited.is_edited is True

    @pytest.mark.asyncio
    async def test_empty_edit_rejected(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        edit_comment = await unit_env.get(EditCommentUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain=DOMAIN)
        item = await create_comment.execute(guest_comment(user_id=owner.id))

        with pytest.raises(ValidationError):
            await edit_comment.execute(
                EditCommentRequest(comment_id=item.id, user_id=owner.id, content="")
            )
