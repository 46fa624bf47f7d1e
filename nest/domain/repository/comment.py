"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from nest.domain.model.comment import Comment, NewComment
from nest.domain.value import CommentId, CommentPath, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        """Find several comments by ID.

        Missing ids are skipped. Order of the result is unspecified.

        Args:
            comment_ids: Comment identifiers

        Returns:
            The comments that exist
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in tree order.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments, ordered by path
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def insert(self, comment: NewComment) -> Comment:
        """Insert a new comment and let storage assign its id.

        The returned comment has no path yet; see assign_path.

        Args:
            comment: Comment content with resolved post_id

        Returns:
            The stored comment with its id
        """
        pass

    @abstractmethod
    async def assign_path(
        self, comment_id: CommentId, post_id: PostId, path: CommentPath
    ) -> Comment:
        """Write the materialized path (and resolved post) of a new comment.

        Must run in the same unit of work as the insert it follows.

        Args:
            comment_id: The comment just inserted
            post_id: Owning post
            path: Materialized path ending with comment_id

        Returns:
            The updated comment
        """
        pass
