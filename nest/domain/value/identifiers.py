"""Strongly typed identifiers for blog entities.

Identifiers are integers assigned by the storage layer on insert. Using
NewType keeps post and comment ids from being mixed up.
"""

from typing import NewType

PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
