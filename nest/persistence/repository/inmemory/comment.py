"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from nest.domain.model.comment import Comment, NewComment
from nest.domain.repository.comment import CommentRepository
from nest.domain.value import CommentId, CommentPath, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    IDs are handed out sequentially from 1, like an identity column.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: list[CommentId]) -> list[Comment]:
        """Find several comments by ID."""
        return [self._comments[i] for i in comment_ids if i in self._comments]

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in tree order."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Sort by path (tree order)
        comments.sort(key=lambda c: c.path.root if c.path else "")

        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.id)
        return comments

    async def insert(self, comment: NewComment) -> Comment:
        """Store a comment under the next free ID."""
        now = datetime.now()
        stored = Comment(
            id=CommentId(next(self._ids)),
            post_id=comment.post_id,
            body=comment.body,
            parent_id=comment.parent_id,
            path=None,
            created_at=now,
            updated_at=now,
        )
        self._comments[stored.id] = stored
        return stored

    async def assign_path(
        self, comment_id: CommentId, post_id: PostId, path: CommentPath
    ) -> Comment:
        """Write the path (and resolved post) onto a stored comment."""
        # Comments are immutable, store an updated copy
        updated = self._comments[comment_id].model_copy(
            update={"post_id": post_id, "path": path, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated
