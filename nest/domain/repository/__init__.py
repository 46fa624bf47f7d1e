"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from nest.domain.repository.comment import CommentRepository
from nest.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
]
