"""Unit tests for the widget site check."""

import pytest

from commentkit.application.usecase.widget import (
    VerifyWidgetSiteRequest,
    VerifyWidgetSiteUseCase,
)
from commentkit.application.usecase.widget.verify_widget_site import (
    NOT_REGISTERED,
    NOT_VERIFIED,
)
from tests.conftest import make_site, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVerifyWidgetSiteUseCase:
    @pytest.mark.asyncio
    async def test_verified_site(self, unit_env):
        verify = await unit_env.get(VerifyWidgetSiteUseCase)
        site = await make_site(unit_env, await make_user(unit_env))

        response = await verify.execute(VerifyWidgetSiteRequest(domain="blog.example.com"))

        assert response.verified is True
        assert response.site_id == site.id
        assert response.error is None

    @pytest.mark.asyncio
    async def test_unverified_site(self, unit_env):
        verify = await unit_env.get(VerifyWidgetSiteUseCase)
        await make_site(unit_env, await make_user(unit_env), verified=False)

        response = await verify.execute(VerifyWidgetSiteRequest(domain="blog.example.com"))

        assert response.verified is False
        assert response.error == NOT_VERIFIED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", ["unknown.example.com", "not a domain"])
    async def test_unknown_or_malformed_domain(self, unit_env, domain):
        verify = await unit_env.get(VerifyWidgetSiteUseCase)

        response = await verify.execute(VerifyWidgetSiteRequest(domain=domain))

        assert response.verified is False
        assert response.site_id is None
        assert response.error == NOT_REGISTERED
