"""Get post use cases."""

from pydantic import BaseModel

from nest.application.usecase.base import BaseUseCase
from nest.application.usecase.comment import CommentItem
from nest.domain.service import CommentService, PostService
from nest.domain.value import PostId

from .create_post import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase(BaseUseCase):
    """Use case for getting a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Raises NotFoundError if the post does not exist."""
        post = await self.post_service.get_post(PostId(request.post_id))
        return PostItem.from_post(post)


class PostPageResponse(BaseModel):
    """The front page: a post and its whole comment thread."""

    post: PostItem
    comments: list[CommentItem]


class GetPostPageUseCase(BaseUseCase):
    """Use case for the front page.

    Loads the first post and every comment on it, each annotated with its
    depth so a renderer can indent the thread.
    """

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize post page use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: None = None) -> PostPageResponse:
        """Execute the front page flow.

        Returns:
            First post with its comments

        Raises:
            NotFoundError: If there are no posts yet
        """
        post = await self.post_service.get_first_post()
        comments = await self.comment_service.get_comments_for_post(post.id)

        return PostPageResponse(
            post=PostItem.from_post(post),
            comments=[CommentItem.from_comment(c) for c in comments],
        )
