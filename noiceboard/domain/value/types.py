"""Domain value objects for Noice Board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic. String values are
trimmed before their length is checked.
"""

import re
from enum import Enum
from typing import Any, Optional

from pydantic import StrictInt, field_validator

from noiceboard.domain.error import ValidationError
from noiceboard.domain.value.common import RootValueObject
from noiceboard.domain.value.result import Failure, Result, Success, ValidationFailure

NOICE_AMOUNT_MAX = 999999
DEFAULT_GROUP = "general"

# Hiragana, Katakana and CJK ideographs are allowed alongside ASCII
_HASHTAG_PATTERN = re.compile(
    r"#[a-zA-Z0-9\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf_-]+"
)
_GROUP_NAME_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9]|[-_](?![-_]))*")


def validate_trimmed_length(
    v: str, label: str, min_length: int, max_length: int
) -> str:
    """Trim a string and check its length bounds.

    Raises:
        ValueError: If the trimmed string is empty or out of bounds
    """
    trimmed = v.strip()
    if not trimmed:
        raise ValueError(f"{label} must not be empty")
    if len(trimmed) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    if len(trimmed) > max_length:
        raise ValueError(f"{label} must be at most {max_length} characters")
    return trimmed


class Username(RootValueObject[str]):
    """Login name of a user.

    Must be 3-20 ASCII alphanumeric characters. Never changes once assigned.
    """

    field_name = "username"

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and character set."""
        trimmed = validate_trimmed_length(v, "Username", 3, 20)
        if not re.fullmatch(r"[a-zA-Z0-9]+", trimmed):
            raise ValueError("Username may only contain letters and digits")
        return trimmed


class UserDisplayName(RootValueObject[str]):
    """Human-readable name shown next to a user's posts (1-100 characters)."""

    field_name = "display_name"

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name length."""
        return validate_trimmed_length(v, "Display name", 1, 100)


class PostTitle(RootValueObject[str]):
    """Post title (1-100 characters)."""

    field_name = "title"

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title length."""
        return validate_trimmed_length(v, "Title", 1, 100)


class PostContent(RootValueObject[str]):
    """Post body (1-1000 characters)."""

    field_name = "content"

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate content length."""
        return validate_trimmed_length(v, "Content", 1, 1000)


class NoiceComment(RootValueObject[str]):
    """Optional message attached to a Noice (1-200 characters)."""

    field_name = "noice_comment"

    @field_validator("root")
    @classmethod
    def validate_noice_comment(cls, v: str) -> str:
        """Validate Noice comment length."""
        return validate_trimmed_length(v, "Noice comment", 1, 200)


class OrderedIntValueObject(RootValueObject[StrictInt]):
    """Integer value object ordered by its value.

    Only instances of the same class compare; mixing NoiceAmount with
    NoiceLimit raises TypeError like any unordered pair.
    """

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root >= other.root


class NoiceAmount(OrderedIntValueObject):
    """Weight of a Noice, or a user's spendable Noice balance.

    Integer between 0 and 999999. Arithmetic re-validates the result, so an
    addition past the maximum or a subtraction below zero raises.
    """

    field_name = "noice_amount"

    @field_validator("root")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Validate amount is within bounds."""
        if v < 0:
            raise ValueError("NoiceAmount must be 0 or greater")
        if v > NOICE_AMOUNT_MAX:
            raise ValueError(f"NoiceAmount must be {NOICE_AMOUNT_MAX} or less")
        return v

    @classmethod
    def zero(cls) -> "NoiceAmount":
        return cls(0)

    def add(self, other: "NoiceAmount") -> "NoiceAmount":
        """Return the sum of both amounts.

        Raises:
            ValidationError: If the sum exceeds the maximum
        """
        return NoiceAmount.create_or_raise(self.root + other.root)

    def subtract(self, other: "NoiceAmount") -> "NoiceAmount":
        """Return the difference of both amounts.

        Raises:
            ValidationError: If the result would be negative
        """
        if other.root > self.root:
            raise ValidationError(
                "NoiceAmount cannot become negative", field=self.field_name
            )
        return NoiceAmount(self.root - other.root)


class RupeeAmount(OrderedIntValueObject):
    """Non-negative integer currency amount."""

    field_name = "rupee_amount"

    @field_validator("root")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate amount is not negative."""
        if v < 0:
            raise ValueError("RupeeAmount must be 0 or greater")
        return v

    @classmethod
    def zero(cls) -> "RupeeAmount":
        return cls(0)

    def add(self, other: "RupeeAmount") -> "RupeeAmount":
        return RupeeAmount(self.root + other.root)

    def subtract(self, other: "RupeeAmount") -> "RupeeAmount":
        """Return the difference of both amounts.

        Raises:
            ValidationError: If the result would be negative
        """
        if other.root > self.root:
            raise ValidationError(
                "RupeeAmount cannot become negative", field=self.field_name
            )
        return RupeeAmount(self.root - other.root)


class NoiceLimit(OrderedIntValueObject):
    """Maximum number of Noice one user may place within a group."""

    field_name = "noice_limit"

    @field_validator("root")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate limit is a positive integer."""
        if v < 1:
            raise ValueError("NoiceLimit must be a positive integer")
        return v

    def allows(self, used: int) -> bool:
        """Whether one more Noice fits after ``used`` have been placed."""
        return used < self.root


class Hashtag(RootValueObject[str]):
    """Hashtag attached to a post.

    Starts with '#', followed by letters, digits, Japanese kana/kanji,
    hyphens or underscores. At most 50 characters including the '#'.
    Examples: '#React', '#設計', '#project_management'
    """

    field_name = "hashtag"

    @field_validator("root")
    @classmethod
    def validate_hashtag(cls, v: str) -> str:
        """Validate hashtag format."""
        trimmed = validate_trimmed_length(v, "Hashtag", 1, 50)
        if not _HASHTAG_PATTERN.fullmatch(trimmed):
            raise ValueError(
                "Hashtag must start with '#' and contain only letters, digits, "
                "Japanese characters, hyphens and underscores"
            )
        return trimmed


class HashtagList(RootValueObject[tuple[Hashtag, ...]]):
    """Ordered, duplicate-free collection of hashtags."""

    field_name = "hashtags"

    @field_validator("root")
    @classmethod
    def deduplicate(cls, v: tuple[Hashtag, ...]) -> tuple[Hashtag, ...]:
        """Drop repeated hashtags, keeping the first occurrence."""
        seen: set[str] = set()
        unique = []
        for tag in v:
            if tag.root not in seen:
                seen.add(tag.root)
                unique.append(tag)
        return tuple(unique)

    @classmethod
    def empty(cls) -> "HashtagList":
        return cls(())

    def add(self, tag: "str | Hashtag") -> "HashtagList":
        """Return a list that also contains ``tag``.

        Raises:
            ValidationError: If ``tag`` is not a valid hashtag
        """
        hashtag = tag if isinstance(tag, Hashtag) else Hashtag.create_or_raise(tag)
        if hashtag in self.root:
            return self
        return HashtagList((*self.root, hashtag))

    def remove(self, tag: "str | Hashtag") -> "HashtagList":
        """Return a list without ``tag``.

        Raises:
            ValidationError: If ``tag`` is not a valid hashtag
        """
        hashtag = tag if isinstance(tag, Hashtag) else Hashtag.create_or_raise(tag)
        return HashtagList(tuple(h for h in self.root if h != hashtag))

    def contains(self, tag: "str | Hashtag") -> bool:
        """Whether ``tag`` is in the list. Invalid tags are never contained."""
        if isinstance(tag, Hashtag):
            return tag in self.root
        result = Hashtag.create(tag)
        return isinstance(result, Success) and result.data in self.root

    def as_strings(self) -> list[str]:
        return [tag.root for tag in self.root]

    def __len__(self) -> int:
        return len(self.root)


class PostGroupName(RootValueObject[str]):
    """Name of a single post group (one segment of a group path).

    1-50 characters. Letters, digits, hyphens and underscores; must start and
    end with a letter or digit and may not contain two symbols in a row.
    Examples: 'tech', 'front-end', 'team_a'
    """

    field_name = "post_group"

    @field_validator("root")
    @classmethod
    def validate_group_name(cls, v: str) -> str:
        """Validate group name format."""
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Group name must be 1-50 characters")
        if not _GROUP_NAME_PATTERN.fullmatch(v) or not v[-1].isalnum():
            raise ValueError(
                "Group name may only contain letters, digits, hyphens and "
                "underscores, must start and end with a letter or digit, "
                "and may not repeat symbols"
            )
        return v

    @classmethod
    def default(cls) -> "PostGroupName":
        return cls(DEFAULT_GROUP)


class PostGroupPath(RootValueObject[str]):
    """Slash-separated position of a group in the hierarchy.

    Examples: 'general', 'tech', 'tech/frontend'
    """

    field_name = "post_group_path"

    @field_validator("root")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate path shape and every segment."""
        if len(v) == 0:
            raise ValueError("Group path must not be empty")
        if v.startswith("/") or v.endswith("/"):
            raise ValueError("Group path may not start or end with '/'")
        if "//" in v:
            raise ValueError("Group path may not contain consecutive '/'")
        for segment in v.split("/"):
            result = PostGroupName.create(segment)
            if isinstance(result, Failure):
                raise ValueError(
                    f"Invalid segment '{segment}' in group path: {result.error.message}"
                )
        return v

    @classmethod
    def default(cls) -> "PostGroupPath":
        return cls(DEFAULT_GROUP)

    @classmethod
    def from_segments(cls, segments: list[PostGroupName]) -> "PostGroupPath":
        return cls.create_or_raise("/".join(s.root for s in segments))

    @property
    def segments(self) -> list[PostGroupName]:
        return [PostGroupName(s) for s in self.root.split("/")]

    @property
    def name(self) -> PostGroupName:
        """Last segment, the name of the group this path points to."""
        return self.segments[-1]

    @property
    def depth(self) -> int:
        return self.root.count("/") + 1

    @property
    def parent(self) -> Optional["PostGroupPath"]:
        """Path of the enclosing group, or None for a top-level group."""
        if "/" not in self.root:
            return None
        return PostGroupPath(self.root.rsplit("/", 1)[0])

    def child(self, name: PostGroupName) -> "PostGroupPath":
        return PostGroupPath(f"{self.root}/{name.root}")

    def is_ancestor_of(self, other: "PostGroupPath") -> bool:
        return other.root.startswith(self.root + "/")


class ReviewStatus(str, Enum):
    """Moderation state of a post."""

    PENDING = "PENDING"
    SCHEDULED = "SCHEDULED"
    AS_IS = "AS_IS"
    COMPLETED = "COMPLETED"

    @classmethod
    def create(cls, raw: Any) -> Result["ReviewStatus", ValidationFailure]:
        """Parse a status name (case-insensitive) without raising."""
        if isinstance(raw, ReviewStatus):
            return Success(raw)
        if isinstance(raw, str):
            try:
                return Success(cls(raw.strip().upper()))
            except ValueError:
                pass
        return Failure(
            ValidationFailure(
                field="review_status",
                message=f"Invalid review status: {raw!r}. "
                f"Expected one of {', '.join(s.value for s in cls)}",
            )
        )

    @classmethod
    def create_or_raise(cls, raw: Any) -> "ReviewStatus":
        """Parse a status name, raising ValidationError when unknown."""
        result = cls.create(raw)
        if isinstance(result, Failure):
            raise ValidationError(result.error.message, field=result.error.field)
        return result.data
