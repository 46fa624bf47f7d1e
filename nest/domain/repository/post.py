"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from nest.domain.model.post import NewPost, Post
from nest.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_first(self) -> Optional[Post]:
        """Find the post with the lowest ID.

        Returns:
            The first post, None if there are no posts
        """
        pass

    @abstractmethod
    async def insert(self, post: NewPost) -> Post:
        """Insert a new post and let storage assign its id.

        Args:
            post: Post content

        Returns:
            The stored post
        """
        pass
