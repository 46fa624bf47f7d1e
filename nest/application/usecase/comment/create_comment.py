"""Create comment use case."""

from pydantic import BaseModel

from nest.application.usecase.base import BaseUseCase
from nest.domain.service import CommentService, PostService
from nest.domain.value import CommentId, PostId

from .item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request.

    post_id may be omitted for replies; it is then inherited from the parent.
    """

    body: str
    post_id: int | None = None
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post exists when one is named explicitly
        2. Create comment via comment service (resolves parent, materializes path)

        Args:
            request: Create comment request

        Returns:
            Created comment with path and depth

        Raises:
            NotFoundError: If the post or the parent comment does not exist
            ValidationError: If neither post nor parent is given, or they disagree
        """
        post_id = PostId(request.post_id) if request.post_id is not None else None

        if post_id is not None:
            await self.post_service.get_post(post_id)

        comment = await self.comment_service.create_comment(
            body=request.body,
            post_id=post_id,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        return CreateCommentResponse.from_comment(comment)
