"""Post domain service."""

import logfire

from nest.domain.error import NotFoundError
from nest.domain.model.post import NewPost, Post
from nest.domain.repository import PostRepository
from nest.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, title: str, body: str = "") -> Post:
        """Create a post.

        Args:
            title: Post title
            body: Post body

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", title=title):
            saved = await self.post_repository.insert(NewPost(title=title, body=body))
            logfire.info("Post created", post_id=saved.id)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, failing when it does not exist.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_first_post(self) -> Post:
        """Get the post with the lowest ID.

        Raises:
            NotFoundError: If there are no posts
        """
        with logfire.span("post_service.get_first_post"):
            post = await self.post_repository.find_first()
            if post is None:
                logfire.warn("No posts found")
                raise NotFoundError("Post", "first")
            return post
