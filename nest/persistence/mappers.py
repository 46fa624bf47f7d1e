"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from nest.domain.model import Comment, NewComment, NewPost, Post
from nest.domain.value import CommentId, CommentPath, PostId


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row.get("body") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_post_to_dict(post: NewPost) -> Dict[str, Any]:
    """Convert NewPost to a dict for insertion."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        body=row["body"],
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        path=CommentPath(row["path"]) if row.get("path") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert NewComment to a dict for insertion.

    path is left out; it is written by a separate update once the id exists.
    """
    return comment.model_dump()
