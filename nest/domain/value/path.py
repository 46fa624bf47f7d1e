"""Materialized comment path.

A path is the dot-separated chain of comment ids from the thread root down
to the comment itself, e.g. ``"1.2.3"`` for comment 3 replying to comment 2
replying to top-level comment 1.
"""

import re

from pydantic import field_validator

from nest.domain.value.common import RootValueObject
from nest.domain.value.identifiers import CommentId

SEPARATOR = "."

_PATH_PATTERN = re.compile(r"^[1-9][0-9]*(\.[1-9][0-9]*)*$")


class CommentPath(RootValueObject[str]):
    """Ancestor-and-self comment ids, root first."""

    @field_validator("root")
    @classmethod
    def validate_path_format(cls, v: str) -> str:
        """Validate the path is one or more positive ids joined by dots."""
        if not _PATH_PATTERN.match(v):
            raise ValueError(
                "Comment path must be positive integer ids separated by '.'"
            )
        return v

    @classmethod
    def top_level(cls, comment_id: CommentId) -> "CommentPath":
        """Path of a top-level comment."""
        return cls(str(comment_id))

    def child(self, comment_id: CommentId) -> "CommentPath":
        """Path of a direct reply to the comment this path belongs to."""
        return CommentPath(f"{self.root}{SEPARATOR}{comment_id}")

    @property
    def segments(self) -> list[str]:
        return self.root.split(SEPARATOR)

    @property
    def depth(self) -> int:
        """Number of segments; 1 for a top-level comment."""
        return len(self.segments)

    @property
    def leaf_id(self) -> CommentId:
        """Id of the comment the path belongs to."""
        return CommentId(int(self.segments[-1]))

    @property
    def ancestor_ids(self) -> list[CommentId]:
        """Ids of all ancestors, root first, excluding the comment itself."""
        return [CommentId(int(segment)) for segment in self.segments[:-1]]
