"""Test harness for unit and integration tests.

Unit tests run entirely on mocks. Integration tests that unmock
persistence expect a migrated PostgreSQL at DATABASE__URL.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from commentkit.interface.api.app import create_app
from commentkit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container (so a fresh in-memory store)
    - Yields a request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_site(unit_env):
            site_service = await unit_env.get(SiteService)
            site = await site_service.create_site(owner_id, "Blog", Domain("blog.example.com"))
            assert site.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for API test client fixtures.

    The app runs on a fresh mock container; tests reach the container
    through `client.app.state.dishka_container`.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        container = build_test_container()
        with TestClient(create_app(container=container)) as test_client:
            yield test_client
            test_client.portal.call(container.close)

    return _client
