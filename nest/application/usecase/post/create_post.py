"""Create post use case."""

from datetime import datetime

from pydantic import BaseModel

from nest.application.usecase.base import BaseUseCase
from nest.domain.model import Post
from nest.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    body: str = ""


class PostItem(BaseModel):
    """Post details in responses."""

    post_id: int
    title: str
    body: str
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            post_id=post.id,
            title=post.title,
            body=post.body,
            created_at=post.created_at,
        )


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        post = await self.post_service.create_post(
            title=request.title, body=request.body
        )
        return PostItem.from_post(post)
