"""Comment domain service."""

import logfire

from nest.domain.error import (
    MissingPostError,
    NotFoundError,
    ParentNotFoundError,
    ParentPostMismatchError,
)
from nest.domain.model.comment import Comment, NewComment, ThreadedComment
from nest.domain.repository import CommentRepository
from nest.domain.value import CommentId, CommentPath, PostId

from .base import Service


def materialize_path(comment_id: CommentId, parent: Comment | None) -> CommentPath:
    """Compute the path of a freshly inserted comment.

    Args:
        comment_id: ID storage assigned to the new comment
        parent: Parent comment for replies, None for top-level comments

    Returns:
        parent.path + "." + comment_id for replies, comment_id otherwise
    """
    if parent is None:
        return CommentPath.top_level(comment_id)
    return parent.materialized_path().child(comment_id)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        body: str,
        post_id: PostId | None = None,
        parent_id: CommentId | None = None,
    ) -> ThreadedComment:
        """Create a comment on a post or reply to another comment.

        The comment is inserted first so storage can assign its id, then its
        path is materialized and written back. Both writes go through the same
        repository session and are committed together by the caller.

        Args:
            body: Comment text
            post_id: Post ID (inherited from the parent when omitted)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with path and depth

        Raises:
            ParentNotFoundError: If parent_id references no comment
            MissingPostError: If neither post_id nor parent_id is given
            ParentPostMismatchError: If post_id differs from the parent's post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            parent_id=parent_id,
        ):
            parent = None
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise ParentNotFoundError(str(parent_id))

            if post_id is None:
                if parent is None:
                    raise MissingPostError()
                post_id = parent.post_id
            elif parent is not None and parent.post_id != post_id:
                logfire.error(
                    "Parent comment does not belong to post",
                    parent_id=parent_id,
                    parent_post_id=parent.post_id,
                    target_post_id=post_id,
                )
                raise ParentPostMismatchError(
                    str(parent.id), str(parent.post_id), str(post_id)
                )

            inserted = await self.comment_repository.insert(
                NewComment(post_id=post_id, body=body, parent_id=parent_id)
            )

            path = materialize_path(inserted.id, parent)
            saved = await self.comment_repository.assign_path(
                inserted.id, post_id, path
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                path=str(path),
                depth=path.depth,
            )
            return ThreadedComment.from_comment(saved)

    async def get_comments_for_post(self, post_id: PostId) -> list[ThreadedComment]:
        """Get all comments for a post, each annotated with its depth.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments in tree order
        """
        with logfire.span(
            "comment_service.get_comments_for_post",
            post_id=post_id,
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            threaded = [ThreadedComment.from_comment(c) for c in comments]
            logfire.info(
                "Comments retrieved for post",
                post_id=post_id,
                count=len(threaded),
            )
            return threaded

    async def get_comment(self, comment_id: CommentId) -> ThreadedComment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return ThreadedComment.from_comment(comment)

    async def get_ancestors(self, comment_id: CommentId) -> list[ThreadedComment]:
        """Get the chain of comments a comment replies to, root first.

        Args:
            comment_id: Comment ID

        Returns:
            Ancestors from the top-level comment down to the direct parent

        Raises:
            NotFoundError: If the comment does not exist
        """
        _, ancestors = await self.get_comment_with_ancestors(comment_id)
        return ancestors

    async def get_comment_with_ancestors(
        self, comment_id: CommentId
    ) -> tuple[ThreadedComment, list[ThreadedComment]]:
        """Get a comment together with its ancestors, root first.

        Uses the materialized path, so the comment and its ancestors take one
        lookup each. Ancestors missing from storage are left out and logged.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_ancestors", comment_id=comment_id):
            comment = await self.get_comment(comment_id)
            ancestor_ids = comment.materialized_path().ancestor_ids
            if not ancestor_ids:
                return comment, []

            found = await self.comment_repository.find_by_ids(ancestor_ids)
            by_id = {c.id: c for c in found}
            missing = [i for i in ancestor_ids if i not in by_id]
            if missing:
                logfire.warn(
                    "Ancestors on comment path not found",
                    comment_id=comment_id,
                    path=str(comment.path),
                    missing_ids=missing,
                )

            ancestors = [
                ThreadedComment.from_comment(by_id[ancestor_id])
                for ancestor_id in ancestor_ids
                if ancestor_id in by_id
            ]
            logfire.info(
                "Ancestors retrieved",
                comment_id=comment_id,
                count=len(ancestors),
            )
            return comment, ancestors

    async def get_replies(self, comment_id: CommentId) -> list[ThreadedComment]:
        """Get direct replies to a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_replies", comment_id=comment_id):
            await self.get_comment(comment_id)
            children = await self.comment_repository.find_children(comment_id)
            return [ThreadedComment.from_comment(c) for c in children]
