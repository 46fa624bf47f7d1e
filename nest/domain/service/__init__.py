"""Domain services."""

from .base import Service
from .comment_service import CommentService, materialize_path
from .post_service import PostService

__all__ = [
    "CommentService",
    "PostService",
    "Service",
    "materialize_path",
]
