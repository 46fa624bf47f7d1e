"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nest.domain.model import NewPost, Post
from nest.domain.repository import PostRepository
from nest.domain.value import PostId
from nest.persistence.mappers import new_post_to_dict, row_to_post
from nest.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_first(self) -> Optional[Post]:
        """Find the post with the lowest ID."""
        stmt = select(posts_table).order_by(posts_table.c.id).limit(1)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def insert(self, post: NewPost) -> Post:
        """Insert a post; the id comes from the identity column."""
        stmt = (
            posts_table.insert()
            .values(**new_post_to_dict(post))
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict())
