"""Post domain service."""

import logfire

from noiceboard.domain.error import NotFoundError
from noiceboard.domain.model import Post
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.value import PostGroupPath, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, repository: NoiceBoardRepository) -> None:
        """Initialize post service.

        Args:
            repository: Noice Board repository
        """
        self.repository = repository

    async def create_post(self, post: Post) -> Post:
        """Store a new post.

        Args:
            post: Post to store

        Returns:
            The stored post

        Raises:
            RepositoryFailureError: If a post with the same ID exists
        """
        with logfire.span(
            "post_service.create_post", post_id=str(post.id), title=post.title.value
        ):
            self.unwrap(await self.repository.create_post(post), "Post", str(post.id))
            logfire.info(
                "Post created", post_id=str(post.id), group=post.group_path.value
            )
            return post

    async def save_post(self, post: Post) -> Post:
        """Replace a stored post.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.save_post", post_id=str(post.id)):
            self.unwrap(await self.repository.update_post(post), "Post", str(post.id))
            logfire.info("Post saved", post_id=str(post.id))
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            result = await self.repository.get_post(post_id)
            if not result.is_success and result.error.is_not_found:
                logfire.warn("Post not found", post_id=str(post_id))
                return None
            post = self.unwrap(result, "Post", str(post_id))
            logfire.info("Post found", post_id=str(post_id), title=post.title.value)
            return post

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self, group_path: PostGroupPath) -> list[Post]:
        with logfire.span("post_service.list_posts", group=group_path.value):
            result = await self.repository.list_posts(group_path)
            return self.unwrap(result, "PostGroup", group_path.value)

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            self.unwrap(await self.repository.delete_post(post_id), "Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
