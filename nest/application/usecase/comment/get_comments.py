"""Get comments use case."""

from pydantic import BaseModel

from nest.application.usecase.base import BaseUseCase
from nest.domain.service import CommentService, PostService
from nest.domain.value import PostId

from .item import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: int
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting all comments for a post with their depth."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID

        Returns:
            Flat list of comments, each with its depth

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        await self.post_service.get_post(post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        items = [CommentItem.from_comment(c) for c in comments]

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=items,
            total=len(items),
        )
