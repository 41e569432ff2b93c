"""Unit tests for the site dashboard use cases."""

import pytest

from commentkit.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from commentkit.application.usecase.site import (
    CreateSiteRequest,
    CreateSiteUseCase,
    DeleteSiteRequest,
    DeleteSiteUseCase,
    GetSiteRequest,
    GetSiteUseCase,
    GetSitesOverviewRequest,
    GetSitesOverviewUseCase,
    ListSitesRequest,
    ListSitesUseCase,
    RegenerateApiKeyRequest,
    RegenerateApiKeyUseCase,
    UpdateSiteRequest,
    UpdateSiteUseCase,
    VerifySiteRequest,
    VerifySiteUseCase,
)
from commentkit.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from commentkit.domain.service import DomainVerifier
from tests.conftest import make_site, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateSiteUseCase:
    @pytest.mark.asyncio
    async def test_create_site(self, unit_env):
        # Arrange
        create_site = await unit_env.get(CreateSiteUseCase)
        owner = await make_user(unit_env)

        # Act
        response = await create_site.execute(
            CreateSiteRequest(user_id=owner.id, name="Blog", domain="Blog.Example.com")
        )

        # Assert
        assert response.domain == "blog.example.com"
        assert response.verified is False
        assert response.api_key
        assert response.verification_token

    @pytest.mark.asyncio
    async def test_duplicate_domain(self, unit_env):
        create_site = await unit_env.get(CreateSiteUseCase)
        owner = await make_user(unit_env)
        other = await make_user(unit_env, email="bob@example.com")
        await make_site(unit_env, owner, domain="blog.example.com")

        with pytest.raises(ConflictError):
            await create_site.execute(
                CreateSiteRequest(user_id=other.id, name="Mine", domain="blog.example.com")
            )

    @pytest.mark.asyncio
    async def test_domain_with_scheme_rejected(self, unit_env):
        create_site = await unit_env.get(CreateSiteUseCase)
        owner = await make_user(unit_env)

        with pytest.raises(ValueError):
            await create_site.execute(
                CreateSiteRequest(user_id=owner.id, name="Blog", domain="https://blog.example.com")
            )


class TestListAndGetSite:
    @pytest.mark.asyncio
    async def test_list_only_own_sites(self, unit_env):
        list_sites = await unit_env.get(ListSitesUseCase)
        owner = await make_user(unit_env)
        other = await make_user(unit_env, email="bob@example.com")
        await make_site(unit_env, owner, domain="a.example.com")
        await make_site(unit_env, other, domain="b.example.com")

        response = await list_sites.execute(ListSitesRequest(user_id=owner.id))

        assert [s.domain for s in response.sites] == ["a.example.com"]
        assert response.sites[0].api_key_preview == "********"

    @pytest.mark.asyncio
    async def test_detail_hides_key_and_lists_comments(self, unit_env):
        get_site = await unit_env.get(GetSiteUseCase)
        create_comment = await unit_env.get(CreateCommentUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)
        await create_comment.execute(
            CreateCommentRequest(
                domain="blog.example.com", page_id="/a", content="hi", author_name="Guest"
            )
        )

        detail = await get_site.execute(GetSiteRequest(site_id=site.id, user_id=owner.id))

        assert detail.api_key == "HIDDEN"
        assert detail.stats.total_comments == 1
        assert detail.stats.pending_comments == 1
        assert detail.stats.total_pages == 1
        assert detail.comments_total == 1
        assert detail.comments[0].page_id is not None

    @pytest.mark.asyncio
    async def test_detail_without_comments(self, unit_env):
        get_site = await unit_env.get(GetSiteUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)

        detail = await get_site.execute(
            GetSiteRequest(site_id=site.id, user_id=owner.id, include_comments=False)
        )

        assert detail.comments is None

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, unit_env):
        get_site = await unit_env.get(GetSiteUseCase)
        owner = await make_user(unit_env)
        other = await make_user(unit_env, email="bob@example.com")
        site = await make_site(unit_env, owner)

        with pytest.raises(NotAuthorizedError):
            await get_site.execute(GetSiteRequest(site_id=site.id, user_id=other.id))

    @pytest.mark.asyncio
    async def test_missing_site(self, unit_env):
        get_site = await unit_env.get(GetSiteUseCase)
        owner = await make_user(unit_env)

        with pytest.raises(NotFoundError):
            await get_site.execute(GetSiteRequest(site_id=999, user_id=owner.id))


class TestUpdateSiteUseCase:
    @pytest.mark.asyncio
    async def test_rename_and_settings(self, unit_env):
        update_site = await unit_env.get(UpdateSiteUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)

        response = await update_site.execute(
            UpdateSiteRequest(
                site_id=site.id,
                user_id=owner.id,
                name="  Renamed ",
                settings={"theme": "dark"},
            )
        )

        assert response.name == "Renamed"
        assert response.settings["theme"] == "dark"
        assert response.domain == "blog.example.com"

    @pytest.mark.asyncio
    async def test_domain_taken(self, unit_env):
        update_site = await unit_env.get(UpdateSiteUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, domain="a.example.com")
        await make_site(unit_env, owner, domain="b.example.com")

        with pytest.raises(ConflictError):
            await update_site.execute(
                UpdateSiteRequest(site_id=site.id, user_id=owner.id, domain="b.example.com")
            )


class TestRegenerateAndDelete:
    @pytest.mark.asyncio
    async def test_regenerate_changes_key(self, unit_env):
        regenerate = await unit_env.get(RegenerateApiKeyUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)

        response = await regenerate.execute(
            RegenerateApiKeyRequest(site_id=site.id, user_id=owner.id)
        )

        assert response.api_key != site.api_key

    @pytest.mark.asyncio
    async def test_delete_site(self, unit_env):
        delete_site = await unit_env.get(DeleteSiteUseCase)
        get_site = await unit_env.get(GetSiteUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner)

        response = await delete_site.execute(DeleteSiteRequest(site_id=site.id, user_id=owner.id))

        assert response.success is True
        with pytest.raises(NotFoundError):
            await get_site.execute(GetSiteRequest(site_id=site.id, user_id=owner.id))


class TestVerifySiteUseCase:
    @pytest.mark.asyncio
    async def test_failed_check_reports_instructions(self, unit_env):
        verify_site = await unit_env.get(VerifySiteUseCase)
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, verified=False)

        response = await verify_site.execute(VerifySiteRequest(site_id=site.id, user_id=owner.id))

        assert response.verified is False
        assert response.verified_at is None
        assert response.verification_url.startswith("https://blog.example.com/")
        assert response.verification_token == site.verification_token

    @pytest.mark.asyncio
    async def test_successful_check(self, unit_env):
        verify_site = await unit_env.get(VerifySiteUseCase)
        verifier = await unit_env.get(DomainVerifier)
        verifier.verified_domains.add("blog.example.com")
        owner = await make_user(unit_env)
        site = await make_site(unit_env, owner, verified=False)

        response = await verify_site.execute(VerifySiteRequest(site_id=site.id, user_id=owner.id))

        assert response.verified is True
        assert response.verified_at is not None


class TestGetSitesOverviewUseCase:
    @pytest.mark.asyncio
    async def test_aggregates_across_sites(self, unit_env):
        overview = await unit_env.get(GetSitesOverviewUseCase)
        create_comment = await unit_env.get(CreateCommentUseCase)
        owner = await make_user(unit_env)
        await make_site(unit_env, owner, domain="a.example.com")
        await make_site(unit_env, owner, domain="b.example.com")
        for domain in ("a.example.com", "b.example.com"):
            await create_comment.execute(
                CreateCommentRequest(
                    domain=domain, page_id="/p", content="hello", author_name="Guest"
                )
            )

        response = await overview.execute(GetSitesOverviewRequest(user_id=owner.id))

        assert response.aggregated.total_sites == 2
        assert response.aggregated.total_comments == 2
        assert response.aggregated.pending_comments == 2
        assert response.aggregated.total_pages == 2
        assert all(s.stats.total_comments == 1 for s in response.sites)
