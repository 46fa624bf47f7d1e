"""Unit tests for CreateCommentUseCase."""

import pytest

from nest.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from nest.domain.error import MissingPostError, NotFoundError, ParentNotFoundError
from nest.domain.service import CommentService, PostService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def make_use_case(env) -> tuple[CreateCommentUseCase, PostService]:
    comment_service = await env.get(CommentService)
    post_service = await env.get(PostService)
    use_case = CreateCommentUseCase(
        comment_service=comment_service,
        post_service=post_service,
    )
    return use_case, post_service


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        # Arrange
        use_case, post_service = await make_use_case(unit_env)
        post = await post_service.create_post(title="Post")

        # Act
        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, body="Hello")
        )

        # Assert
        assert response.comment_id == 1
        assert response.post_id == post.id
        assert response.path == "1"
        assert response.depth == 1
        assert response.parent_id is None

    @pytest.mark.asyncio
    async def test_reply_by_parent_only_inherits_post(self, unit_env):
        use_case, post_service = await make_use_case(unit_env)
        post = await post_service.create_post(title="Post")
        root = await use_case.execute(CreateCommentRequest(post_id=post.id, body="a"))

        reply = await use_case.execute(
            CreateCommentRequest(parent_id=root.comment_id, body="b")
        )

        assert reply.post_id == post.id
        assert reply.parent_id == root.comment_id
        assert reply.path == "1.2"
        assert reply.depth == 2

    @pytest.mark.asyncio
    async def test_nonexistent_post_raises_error(self, unit_env):
        use_case, _ = await make_use_case(unit_env)

        with pytest.raises(NotFoundError, match="Post not found: 1"):
            await use_case.execute(CreateCommentRequest(post_id=1, body="a"))

    @pytest.mark.asyncio
    async def test_nonexistent_parent_raises_error(self, unit_env):
        use_case, post_service = await make_use_case(unit_env)
        post = await post_service.create_post(title="Post")

        with pytest.raises(ParentNotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=post.id, parent_id=5, body="a")
            )

    @pytest.mark.asyncio
    async def test_neither_post_nor_parent_raises_error(self, unit_env):
        use_case, _ = await make_use_case(unit_env)

        with pytest.raises(MissingPostError):
            await use_case.execute(CreateCommentRequest(body="a"))
