"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from nest.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetAncestorsRequest,
    GetAncestorsResponse,
    GetAncestorsUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
)
from nest.domain.error import NotFoundError, ValidationError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    body: str = Field(min_length=1, max_length=10000)
    parent_id: int | None = None  # Parent comment ID for replies


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to a comment without naming the post."""

    body: str = Field(min_length=1, max_length=10000)
    parent_id: int
    post_id: int | None = None


async def _create(
    use_case: CreateCommentUseCase, request: CreateCommentRequest
) -> CreateCommentResponse:
    try:
        return await use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment with its materialized path and depth
    """
    return await _create(
        create_comment_use_case,
        CreateCommentRequest(
            post_id=post_id,
            body=request.body,
            parent_id=request.parent_id,
        ),
    )


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    request: CreateReplyAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Reply to a comment; the post is inherited from the parent when omitted."""
    return await _create(
        create_comment_use_case,
        CreateCommentRequest(
            post_id=request.post_id,
            body=request.body,
            parent_id=request.parent_id,
        ),
    )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comments for a post, each with its depth.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat list of comments in tree order
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/comments/{comment_id}/ancestors", response_model=GetAncestorsResponse)
async def get_ancestors(
    comment_id: int,
    get_ancestors_use_case: FromDishka[GetAncestorsUseCase],
) -> GetAncestorsResponse:
    """Get a comment together with the chain of comments above it."""
    try:
        return await get_ancestors_use_case.execute(
            GetAncestorsRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/comments/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """Get direct replies to a comment."""
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
