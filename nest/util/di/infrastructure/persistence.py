"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from nest.config import Settings
from nest.domain.repository import CommentRepository, PostRepository
from nest.persistence.database import create_engine, create_session_factory
from nest.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
)
from nest.util.di.base import ProviderBase
from nest.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. A comment insert and its
        path update therefore land in the same transaction.

        The container hands the request error back through the yield instead
        of raising it here, so the outcome is read from the sent value.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is None:
                await session.commit()
                logfire.info("Session committed")
            else:
                logfire.warn("Session rollback", error=str(exc))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)
