"""PostgreSQL repository implementations."""

from nest.persistence.repository.comment import PostgresCommentRepository
from nest.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
