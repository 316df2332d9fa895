"""Test configuration and fixtures."""

import logfire

from noiceboard.domain.model import Post, PostGroup, User
from noiceboard.domain.repository import RepositoryError, RepositoryErrorCode
from noiceboard.domain.value import (
    Failure,
    HashtagList,
    NoiceAmount,
    NoiceLimit,
    PostContent,
    PostGroupName,
    PostGroupPath,
    PostTitle,
    UserDisplayName,
    UserId,
    Username,
)
from noiceboard.persistence.repository.inmemory import InMemoryNoiceBoardRepository

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice", balance: int = 100) -> User:
    """Helper function to build a valid user."""
    return User.create_new(
        username=Username.create_or_raise(username),
        display_name=UserDisplayName.create_or_raise(username.title()),
        noice_amount=NoiceAmount.create_or_raise(balance),
    )


def make_post(
    author_id: UserId | None = None,
    group: str = "general",
    title: str = "Test Post",
    content: str = "Test content",
    hashtags: list[str] | None = None,
) -> Post:
    """Helper function to build a valid post."""
    return Post.create_new(
        title=PostTitle.create_or_raise(title),
        content=PostContent.create_or_raise(content),
        author_id=author_id or UserId.generate(),
        group_path=PostGroupPath.create_or_raise(group),
        hashtags=HashtagList.create_or_raise(hashtags or []),
    )


def make_group(name: str = "general", limit: int = 4, posts=()) -> PostGroup:
    """Helper function to build a group without children."""
    return PostGroup.create(
        name=PostGroupName.create_or_raise(name),
        noice_limit=NoiceLimit.create_or_raise(limit),
        posts=posts,
    )


class PostWriteFailureRepository(InMemoryNoiceBoardRepository):
    """In-memory store whose post updates always fail unexpectedly."""

    async def update_post(self, post: Post):
        return Failure(
            RepositoryError(
                code=RepositoryErrorCode.UNEXPECTED_ERROR,
                message="post store unavailable",
            )
        )
