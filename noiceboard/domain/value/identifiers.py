"""Strongly typed identifiers for Noice Board domain entities.

Each identifier wraps a UUID v4 string. Separate classes prevent mixing up
different entity IDs and make the code more self-documenting.
"""

import re
from typing import TypeVar
from uuid import uuid4

from pydantic import field_validator

from noiceboard.domain.value.common import RootValueObject

UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

IdT = TypeVar("IdT", bound="EntityId")


class EntityId(RootValueObject[str]):
    """UUID v4 identifier."""

    field_name = "id"

    @field_validator("root")
    @classmethod
    def validate_uuid(cls, v: str) -> str:
        """Validate UUID v4 format."""
        if not v.strip():
            raise ValueError(f"{cls.__name__} must not be empty")
        if not UUID_V4_PATTERN.match(v):
            raise ValueError(f"{cls.__name__} must be a UUID v4 string")
        return v

    @classmethod
    def generate(cls: type[IdT]) -> IdT:
        """Generate a fresh random identifier."""
        return cls(str(uuid4()))


class UserId(EntityId):
    """User identifier."""

    field_name = "user_id"


class PostId(EntityId):
    """Post identifier."""

    field_name = "post_id"


class NoiceId(EntityId):
    """Noice identifier."""

    field_name = "noice_id"


class CommentId(EntityId):
    """Comment and review comment identifier."""

    field_name = "comment_id"
