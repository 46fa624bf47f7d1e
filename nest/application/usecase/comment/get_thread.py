"""Thread navigation use cases: ancestors and direct replies of a comment."""

from pydantic import BaseModel

from nest.application.usecase.base import BaseUseCase
from nest.domain.service import CommentService
from nest.domain.value import CommentId

from .item import CommentItem


class GetAncestorsRequest(BaseModel):
    comment_id: int


class GetAncestorsResponse(BaseModel):
    """Ancestors from the top-level comment down to the direct parent."""

    comment: CommentItem
    ancestors: list[CommentItem]


class GetAncestorsUseCase(BaseUseCase):
    """Use case for loading the thread context of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetAncestorsRequest) -> GetAncestorsResponse:
        comment_id = CommentId(request.comment_id)
        comment, ancestors = await self.comment_service.get_comment_with_ancestors(
            comment_id
        )
        return GetAncestorsResponse(
            comment=CommentItem.from_comment(comment),
            ancestors=[CommentItem.from_comment(a) for a in ancestors],
        )


class GetRepliesRequest(BaseModel):
    comment_id: int


class GetRepliesResponse(BaseModel):
    comment_id: int
    replies: list[CommentItem]


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing direct replies to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        replies = await self.comment_service.get_replies(CommentId(request.comment_id))
        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[CommentItem.from_comment(r) for r in replies],
        )
