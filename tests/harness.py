"""Test harness for unit, integration and E2E tests.

Integration runs assume a PostgreSQL instance is reachable with the schema in
place. Settings are loaded from environment variables (configure via .env or
export).
"""

import pytest_asyncio

from nest.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            comment = await service.create_comment(body="hi", post_id=PostId(1))
            assert comment.depth == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
