"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostItem
from .get_post import (
    GetPostPageUseCase,
    GetPostRequest,
    GetPostUseCase,
    PostPageResponse,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostPageUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "PostItem",
    "PostPageResponse",
]
