"""Application layer DI providers."""

from dishka import Scope, provide

from nest.application.usecase.comment import (
    CreateCommentUseCase,
    GetAncestorsUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
)
from nest.application.usecase.post import (
    CreatePostUseCase,
    GetPostPageUseCase,
    GetPostUseCase,
)
from nest.domain.service import CommentService, PostService
from nest.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_page_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostPageUseCase:
        """Provide post page use case."""
        return GetPostPageUseCase(
            post_service=post_service, comment_service=comment_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_ancestors_use_case(
        self, comment_service: CommentService
    ) -> GetAncestorsUseCase:
        """Provide get ancestors use case."""
        return GetAncestorsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)
