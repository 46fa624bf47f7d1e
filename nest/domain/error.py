"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(NotFoundError):
    """Raised when a reply references a comment that does not exist."""

    def __init__(self, parent_id: str):
        super().__init__("Parent comment", parent_id)


class MissingPostError(ValidationError):
    """Raised when a comment has neither a post nor a parent to inherit one from."""

    def __init__(self) -> None:
        super().__init__("Comment requires a post_id or a parent_id")


class ParentPostMismatchError(ValidationError):
    """Raised when a reply names a post other than its parent's."""

    def __init__(self, parent_id: str, parent_post_id: str, post_id: str):
        self.parent_id = parent_id
        self.parent_post_id = parent_post_id
        self.post_id = post_id
        super().__init__(
            f"Parent comment {parent_id} belongs to post {parent_post_id}, "
            f"not {post_id}"
        )


class PathNotMaterializedError(DomainError):
    """Raised when a stored comment has no path to derive its depth from."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} has no materialized path")
