"""Noice Board repository interface."""

from abc import ABC, abstractmethod
from typing import List

from noiceboard.domain.model import Post, PostGroup, User
from noiceboard.domain.repository.base import RepositoryError
from noiceboard.domain.value import PostGroupPath, PostId, Result, UserId


class NoiceBoardRepository(ABC):
    """Repository for groups, posts, Noices and users.

    Defines the contract for board persistence. Methods never raise for
    expected failures: they return a Failure carrying a RepositoryError.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def get_post_group(
        self, path: PostGroupPath
    ) -> Result[PostGroup, RepositoryError]:
        """Get a group and the posts it currently holds.

        Args:
            path: Group path

        Returns:
            The group, or NOT_FOUND
        """
        pass

    @abstractmethod
    async def list_post_groups(self) -> Result[List[PostGroup], RepositoryError]:
        """List every registered group, ordered by path."""
        pass

    @abstractmethod
    async def list_post_group_paths(
        self,
    ) -> Result[List[PostGroupPath], RepositoryError]:
        """List the paths of every registered group, sorted."""
        pass

    @abstractmethod
    async def save_post_group(
        self, path: PostGroupPath, group: PostGroup
    ) -> Result[None, RepositoryError]:
        """Register or replace the group at ``path``.

        Only the name and limit are stored; posts are tracked separately.
        """
        pass

    @abstractmethod
    async def get_post(self, post_id: PostId) -> Result[Post, RepositoryError]:
        """Get a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post, or NOT_FOUND
        """
        pass

    @abstractmethod
    async def list_posts(
        self, group_path: PostGroupPath
    ) -> Result[List[Post], RepositoryError]:
        """List posts in a group, oldest first.

        Args:
            group_path: Group whose direct posts are listed

        Returns:
            Posts whose group_path equals ``group_path`` (possibly empty)
        """
        pass

    @abstractmethod
    async def create_post(self, post: Post) -> Result[None, RepositoryError]:
        """Store a new post.

        Returns:
            Success, or INVALID_DATA if a post with the same id exists
        """
        pass

    @abstractmethod
    async def update_post(self, post: Post) -> Result[None, RepositoryError]:
        """Replace a stored post.

        Returns:
            Success, or NOT_FOUND if the post is unknown
        """
        pass

    @abstractmethod
    async def delete_post(self, post_id: PostId) -> Result[None, RepositoryError]:
        """Delete a post.

        Returns:
            Success, or NOT_FOUND if the post is unknown
        """
        pass

    @abstractmethod
    async def add_noice(
        self, post_id: PostId, user_id: UserId
    ) -> Result[None, RepositoryError]:
        """Add a Noice of amount 1 from ``user_id`` to a post.

        Returns:
            Success, NOT_FOUND, or NOICE_LIMIT_EXCEEDED when the user has
            reached the group's limit
        """
        pass

    @abstractmethod
    async def remove_noice(
        self, post_id: PostId, user_id: UserId
    ) -> Result[None, RepositoryError]:
        """Remove every top-level Noice ``user_id`` gave to a post."""
        pass

    @abstractmethod
    async def get_noice_count(self, post_id: PostId) -> Result[int, RepositoryError]:
        """Get the recursive Noice total of a post."""
        pass

    @abstractmethod
    async def get_user(self, user_id: UserId) -> Result[User, RepositoryError]:
        """Get a user by ID.

        Returns:
            The user, or NOT_FOUND
        """
        pass

    @abstractmethod
    async def list_users(self) -> Result[List[User], RepositoryError]:
        """List every user."""
        pass

    @abstractmethod
    async def update_user(self, user: User) -> Result[None, RepositoryError]:
        """Store a user, replacing any previous version with the same id."""
        pass
