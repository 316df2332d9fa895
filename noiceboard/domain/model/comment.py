"""Comment and review comment entities.

Both are append-only records on a post: once created they never change.
"""

from datetime import datetime

from pydantic import Field, field_validator

from noiceboard.domain.model.common import DomainModel
from noiceboard.domain.value import CommentId, UserId
from noiceboard.domain.value.types import validate_trimmed_length


class Comment(DomainModel):
    """Comment left by a user on a post (1-1000 characters)."""

    id: CommentId
    content: str
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return validate_trimmed_length(v, "Comment", 1, 1000)

    @classmethod
    def create(cls, content: str, author_id: UserId) -> "Comment":
        """Create a new comment stamped with the current time.

        Raises:
            ValidationError: If the content is empty or longer than 1000 characters
        """
        return cls.build(
            "comment", id=CommentId.generate(), content=content, author_id=author_id
        )


class ReviewComment(DomainModel):
    """Moderator note attached to a post during review (1-500 characters)."""

    id: CommentId
    content: str
    reviewer_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return validate_trimmed_length(v, "Review comment", 1, 500)

    @classmethod
    def create(cls, content: str, reviewer_id: UserId) -> "ReviewComment":
        """Create a new review comment stamped with the current time.

        Raises:
            ValidationError: If the content is empty or longer than 500 characters
        """
        return cls.build(
            "review_comment",
            id=CommentId.generate(),
            content=content,
            reviewer_id=reviewer_id,
        )
