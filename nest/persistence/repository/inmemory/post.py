"""In-memory post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from nest.domain.model.post import NewPost, Post
from nest.domain.repository.post import PostRepository
from nest.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_first(self) -> Optional[Post]:
        """Find the post with the lowest ID."""
        if not self._posts:
            return None
        return self._posts[min(self._posts)]

    async def insert(self, post: NewPost) -> Post:
        """Store a post under the next free ID."""
        now = datetime.now()
        stored = Post(
            id=PostId(next(self._ids)),
            title=post.title,
            body=post.body,
            created_at=now,
            updated_at=now,
        )
        self._posts[stored.id] = stored
        return stored
