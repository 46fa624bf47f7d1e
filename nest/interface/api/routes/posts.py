"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from nest.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostPageUseCase,
    GetPostRequest,
    GetPostUseCase,
    PostItem,
    PostPageResponse,
)
from nest.domain.error import NotFoundError

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=10000)


@router.get("/", response_model=PostPageResponse)
async def get_front_page(
    get_post_page_use_case: FromDishka[GetPostPageUseCase],
) -> PostPageResponse:
    """Front page: the first post and all of its comments with depth.

    Returns the data a view layer needs to render the threaded page.
    """
    try:
        return await get_post_page_use_case.execute()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/posts", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostItem:
    """Create a post."""
    return await create_post_use_case.execute(
        CreatePostRequest(title=request.title, body=request.body)
    )


@router.get("/posts/{post_id}", response_model=PostItem)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a post by ID."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
