"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_thread import (
    GetAncestorsRequest,
    GetAncestorsResponse,
    GetAncestorsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
)
from .item import CommentItem

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetAncestorsRequest",
    "GetAncestorsResponse",
    "GetAncestorsUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
]
