"""Domain value objects for Noice Board."""

from noiceboard.domain.value.identifiers import (
    CommentId,
    EntityId,
    NoiceId,
    PostId,
    UserId,
)
from noiceboard.domain.value.result import (
    Failure,
    Result,
    Success,
    ValidationFailure,
)
from noiceboard.domain.value.types import (
    Hashtag,
    HashtagList,
    NoiceAmount,
    NoiceComment,
    NoiceLimit,
    PostContent,
    PostGroupName,
    PostGroupPath,
    PostTitle,
    ReviewStatus,
    RupeeAmount,
    UserDisplayName,
    Username,
)

__all__ = [
    # Identifiers
    "EntityId",
    "UserId",
    "PostId",
    "NoiceId",
    "CommentId",
    # Results
    "Result",
    "Success",
    "Failure",
    "ValidationFailure",
    # Types
    "Username",
    "UserDisplayName",
    "PostTitle",
    "PostContent",
    "NoiceComment",
    "NoiceAmount",
    "RupeeAmount",
    "NoiceLimit",
    "Hashtag",
    "HashtagList",
    "PostGroupName",
    "PostGroupPath",
    "ReviewStatus",
]
