"""Comment entity.

Comments are threaded discussions on posts with unlimited depth.
Each comment stores a materialized path of its ancestry, written once
right after the comment is inserted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nest.domain.error import PathNotMaterializedError
from nest.domain.model.common import DomainModel
from nest.domain.value import CommentId, CommentPath, PostId


class NewComment(DomainModel):
    """Comment content before storage has assigned an id.

    post_id is already resolved here (explicit or inherited from the parent).
    """

    post_id: PostId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - path: Materialized path, None only between insert and path assignment
    """

    id: CommentId
    post_id: PostId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    path: Optional[CommentPath] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def materialized_path(self) -> CommentPath:
        """Return the path, failing if it was never assigned."""
        if self.path is None:
            raise PathNotMaterializedError(str(self.id))
        return self.path


class ThreadedComment(Comment):
    """Comment annotated with its depth in the reply tree.

    depth is derived from path at read time and never persisted.
    """

    depth: int = Field(ge=1)

    @classmethod
    def from_comment(cls, comment: Comment) -> "ThreadedComment":
        path = comment.materialized_path()
        return cls(**{**dict(comment), "depth": path.depth})
