"""Domain value objects."""

from nest.domain.value.identifiers import CommentId, PostId
from nest.domain.value.path import CommentPath

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "CommentPath",
]
