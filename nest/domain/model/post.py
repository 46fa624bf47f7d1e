"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from nest.domain.model.common import DomainModel
from nest.domain.value import PostId


class Post(DomainModel):
    """A blog post that comments are attached to."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class NewPost(DomainModel):
    """Post content before storage has assigned an id."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=10000)
