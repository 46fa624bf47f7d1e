"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nest.domain.model import Comment, NewComment
from nest.domain.repository import CommentRepository
from nest.domain.value import CommentId, CommentPath, PostId
from nest.persistence.mappers import new_comment_to_dict, row_to_comment
from nest.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        """Find several comments by ID."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in tree order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.path)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: NewComment) -> Comment:
        """Insert a comment; the id comes from the identity column."""
        stmt = (
            comments_table.insert()
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def assign_path(
        self, comment_id: CommentId, post_id: PostId, path: CommentPath
    ) -> Comment:
        """Write the materialized path of a freshly inserted comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                post_id=post_id,
                path=path.root,
                updated_at=datetime.now(),
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())
