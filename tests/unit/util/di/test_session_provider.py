"""Unit tests for the request-scoped database session."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest
from dishka import Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from nest.config import Settings
from nest.util.di.infrastructure import ProdPersistenceProvider


class FakeSessionFactoryProvider(Provider):
    """Replaces the engine-backed session factory with one handing out a mock."""

    scope = Scope.APP

    def __init__(self, session: AsyncMock) -> None:
        super().__init__()
        self.session = session

    @provide
    def get_settings(self) -> Settings:
        return Settings()

    @provide
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        session = self.session

        @asynccontextmanager
        async def factory():
            yield session

        return factory


def build_container(session: AsyncMock):
    return make_async_container(
        ProdPersistenceProvider(), FakeSessionFactoryProvider(session)
    )


class TestRequestSession:
    """Commit and rollback at the end of a request scope."""

    @pytest.mark.asyncio
    async def test_successful_request_commits(self):
        # Arrange
        session = AsyncMock(spec=AsyncSession)
        container = build_container(session)

        # Act
        async with container() as request_container:
            assert await request_container.get(AsyncSession) is session
        await container.close()

        # Assert
        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_request_rolls_back_instead_of_committing(self):
        """A comment row flushed before an error must not be committed."""
        # Arrange
        session = AsyncMock(spec=AsyncSession)
        container = build_container(session)

        # Act
        with pytest.raises(RuntimeError, match="path write failed"):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise RuntimeError("path write failed")
        await container.close()

        # Assert
        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
