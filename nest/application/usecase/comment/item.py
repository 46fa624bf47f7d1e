"""Comment representation shared by comment use case responses."""

from datetime import datetime

from pydantic import BaseModel

from nest.domain.model import ThreadedComment


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    post_id: int
    parent_id: int | None
    body: str
    path: str
    depth: int
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: ThreadedComment) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            body=comment.body,
            path=str(comment.materialized_path()),
            depth=comment.depth,
            created_at=comment.created_at,
        )
