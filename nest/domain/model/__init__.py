"""Domain model entities."""

from nest.domain.model.comment import Comment, NewComment, ThreadedComment
from nest.domain.model.post import NewPost, Post

__all__ = [
    "Post",
    "NewPost",
    "Comment",
    "NewComment",
    "ThreadedComment",
]
