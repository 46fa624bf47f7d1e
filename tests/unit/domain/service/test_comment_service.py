"""Unit tests for CommentService."""

from unittest.mock import patch

import pytest

from nest.domain.error import (
    MissingPostError,
    NotFoundError,
    ParentNotFoundError,
    ParentPostMismatchError,
)
from nest.domain.model import NewComment
from nest.domain.repository import CommentRepository
from nest.domain.service import CommentService, materialize_path
from nest.domain.value import CommentId, CommentPath, PostId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestMaterializePath:
    """Tests for the path materializer."""

    def test_top_level_path_is_id(self):
        assert materialize_path(CommentId(12), None) == CommentPath("12")

    @pytest.mark.asyncio
    async def test_reply_path_extends_parent(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.insert(NewComment(post_id=PostId(1), body="p"))
        parent = await comment_repo.assign_path(
            parent.id, parent.post_id, CommentPath("4.9")
        )

        assert materialize_path(CommentId(11), parent) == CommentPath("4.9.11")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_top_level_comment_path_is_own_id(self, unit_env):
        """Scenario: first comment on a post gets path "1" and depth 1."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(1)

        # Act
        c1 = await comment_service.create_comment(body="First", post_id=post_id)

        # Assert
        assert c1.id == 1
        assert str(c1.path) == "1"
        assert c1.depth == 1
        assert c1.post_id == post_id
        assert c1.parent_id is None

        # Verify the path was persisted
        saved = await comment_repo.find_by_id(c1.id)
        assert saved is not None
        assert str(saved.path) == "1"

    @pytest.mark.asyncio
    async def test_reply_inherits_post_and_extends_path(self, unit_env):
        """Scenarios: reply chains produce "1.2" and "1.2.3"."""
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(1)

        c1 = await comment_service.create_comment(body="Root", post_id=post_id)
        c2 = await comment_service.create_comment(body="Reply", parent_id=c1.id)
        c3 = await comment_service.create_comment(body="Nested", parent_id=c2.id)

        assert str(c2.path) == "1.2"
        assert c2.depth == 2
        assert c2.post_id == post_id

        assert str(c3.path) == "1.2.3"
        assert c3.depth == 3
        assert c3.post_id == post_id

    @pytest.mark.asyncio
    async def test_reply_path_is_parent_path_plus_own_id(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        root = await comment_service.create_comment(body="Root", post_id=PostId(1))
        other = await comment_service.create_comment(body="Other", post_id=PostId(1))
        reply = await comment_service.create_comment(body="Reply", parent_id=root.id)

        assert str(reply.path) == f"{root.path}.{reply.id}"
        assert reply.depth == root.depth + 1
        assert str(other.path) == str(other.id)

    @pytest.mark.asyncio
    async def test_reply_with_matching_post_id_is_accepted(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        root = await comment_service.create_comment(body="Root", post_id=PostId(3))
        reply = await comment_service.create_comment(
            body="Reply", post_id=PostId(3), parent_id=root.id
        )

        assert reply.post_id == 3

    @pytest.mark.asyncio
    async def test_missing_parent_raises_error(self, unit_env):
        """Creating comment with non-existent parent should raise error."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ParentNotFoundError, match="Parent comment not found: 99"):
            await comment_service.create_comment(
                body="Orphan", post_id=PostId(1), parent_id=CommentId(99)
            )

        # Nothing was written
        assert await comment_repo.find_by_post(PostId(1)) == []

    @pytest.mark.asyncio
    async def test_parent_not_found_is_a_not_found_error(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(body="x", parent_id=CommentId(5))

    @pytest.mark.asyncio
    async def test_comment_without_post_or_parent_raises_error(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(MissingPostError):
            await comment_service.create_comment(body="Nowhere")

    @pytest.mark.asyncio
    async def test_parent_from_different_post_raises_error(self, unit_env):
        """Reply to comment from different post should raise error."""
        comment_service = await unit_env.get(CommentService)

        parent = await comment_service.create_comment(body="Root", post_id=PostId(1))

        with pytest.raises(ParentPostMismatchError, match="belongs to post 1"):
            await comment_service.create_comment(
                body="Reply", post_id=PostId(2), parent_id=parent.id
            )


class TestGetCommentsForPost:
    """Tests for the comment tree read."""

    @pytest.mark.asyncio
    async def test_returns_every_comment_with_depth(self, unit_env):
        """Scenario: reading a post's comments returns each with its depth."""
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(1)
        c1 = await comment_service.create_comment(body="a", post_id=post_id)
        c2 = await comment_service.create_comment(body="b", parent_id=c1.id)
        c3 = await comment_service.create_comment(body="c", parent_id=c2.id)

        comments = await comment_service.get_comments_for_post(post_id)

        depths = {c.id: c.depth for c in comments}
        assert depths == {c1.id: 1, c2.id: 2, c3.id: 3}

    @pytest.mark.asyncio
    async def test_depth_is_independent_of_read_order(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(1)
        root = await comment_service.create_comment(body="a", post_id=post_id)
        await comment_service.create_comment(body="b", parent_id=root.id)
        await comment_service.create_comment(body="c", post_id=post_id)

        first = await comment_service.get_comments_for_post(post_id)
        second = await comment_service.get_comments_for_post(post_id)

        assert {c.id: c.depth for c in first} == {c.id: c.depth for c in reversed(second)}
        for comment in first:
            assert comment.depth == len(str(comment.path).split("."))

    @pytest.mark.asyncio
    async def test_only_comments_of_the_post_are_returned(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        await comment_service.create_comment(body="a", post_id=PostId(1))
        await comment_service.create_comment(body="b", post_id=PostId(2))

        comments = await comment_service.get_comments_for_post(PostId(2))

        assert [c.body for c in comments] == ["b"]

    @pytest.mark.asyncio
    async def test_post_without_comments_returns_empty_list(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comments_for_post(PostId(1)) == []


class TestThreadNavigation:
    """Tests for ancestors and replies."""

    @pytest.mark.asyncio
    async def test_get_ancestors_root_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        c1 = await comment_service.create_comment(body="a", post_id=PostId(1))
        c2 = await comment_service.create_comment(body="b", parent_id=c1.id)
        c3 = await comment_service.create_comment(body="c", parent_id=c2.id)

        ancestors = await comment_service.get_ancestors(c3.id)

        assert [a.id for a in ancestors] == [c1.id, c2.id]
        assert [a.depth for a in ancestors] == [1, 2]

    @pytest.mark.asyncio
    async def test_top_level_comment_has_no_ancestors(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        c1 = await comment_service.create_comment(body="a", post_id=PostId(1))

        assert await comment_service.get_ancestors(c1.id) == []

    @pytest.mark.asyncio
    async def test_get_ancestors_of_unknown_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found: 42"):
            await comment_service.get_ancestors(CommentId(42))

    @pytest.mark.asyncio
    async def test_missing_ancestor_is_skipped_and_logged(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        c1 = await comment_service.create_comment(body="a", post_id=PostId(1))
        orphan = await comment_repo.insert(NewComment(post_id=PostId(1), body="b"))
        await comment_repo.assign_path(
            orphan.id, orphan.post_id, CommentPath(f"{c1.id}.99.{orphan.id}")
        )

        with patch("nest.domain.service.comment_service.logfire.warn") as warn:
            ancestors = await comment_service.get_ancestors(orphan.id)

        assert [a.id for a in ancestors] == [c1.id]
        warn.assert_called_once()
        assert warn.call_args.kwargs["missing_ids"] == [99]

    @pytest.mark.asyncio
    async def test_get_replies_returns_direct_children_only(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        c1 = await comment_service.create_comment(body="a", post_id=PostId(1))
        c2 = await comment_service.create_comment(body="b", parent_id=c1.id)
        await comment_service.create_comment(body="c", parent_id=c2.id)
        c4 = await comment_service.create_comment(body="d", parent_id=c1.id)

        replies = await comment_service.get_replies(c1.id)

        assert [r.id for r in replies] == [c2.id, c4.id]
        assert all(r.depth == 2 for r in replies)
