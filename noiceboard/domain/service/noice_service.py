"""Noice domain service."""

from typing import Optional

import logfire

from noiceboard.domain.error import NoiceLimitExceededError, NotFoundError
from noiceboard.domain.model import Noice, Post
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.value import NoiceAmount, NoiceId, PostId, UserId

from .base import Service
from .post_group_service import PostGroupService
from .post_service import PostService


class NoiceService(Service):
    """Domain service for giving and querying Noices."""

    def __init__(
        self,
        repository: NoiceBoardRepository,
        post_service: PostService,
        post_group_service: PostGroupService,
    ) -> None:
        """Initialize Noice service.

        Args:
            repository: Noice Board repository
            post_service: Post domain service
            post_group_service: Post group domain service
        """
        self.repository = repository
        self.post_service = post_service
        self.post_group_service = post_group_service

    @staticmethod
    def build_noice(
        from_user_id: UserId,
        post_id: PostId,
        amount: NoiceAmount,
        comment: Optional[str] = None,
    ) -> Noice:
        """Create a Noice, with a comment only when one is given and not blank."""
        if comment is not None and comment.strip():
            return Noice.create_new_with_comment(from_user_id, post_id, amount, comment)
        return Noice.create_new(from_user_id, post_id, amount)

    async def give_noice(self, post_id: PostId, noice: Noice) -> Post:
        """Attach a top-level Noice to a post and store it.

        When the post's group is registered the Noice goes through the
        group, which enforces the per-user limit against current counts.

        Args:
            post_id: Receiving post
            noice: Noice to attach

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            NoiceLimitExceededError: If the giver has reached the group's limit
        """
        with logfire.span(
            "noice_service.give_noice",
            post_id=str(post_id),
            user_id=str(noice.from_user_id),
            amount=noice.amount.value,
        ):
            post = await self.post_service.get_by_id(post_id)
            group = await self.post_group_service.find_group(post.group_path)
            if group is None:
                logfire.info(
                    "Post group not registered, no limit applied",
                    group=post.group_path.value,
                )
                updated = post.add_noice(noice)
            else:
                try:
                    updated_group = group.give_noice(post_id, noice)
                except NoiceLimitExceededError:
                    logfire.warn(
                        "Noice rejected",
                        post_id=str(post_id),
                        user_id=str(noice.from_user_id),
                        group=post.group_path.value,
                    )
                    raise
                updated = updated_group.find_post(post_id)
                if updated is None:
                    raise NotFoundError("Post", str(post_id))

            saved = await self.post_service.save_post(updated)
            logfire.info(
                "Noice given",
                post_id=str(post_id),
                total=saved.total_noice_amount(),
            )
            return saved

    async def react_to_noice(
        self, post_id: PostId, parent_noice_id: NoiceId, noice: Noice
    ) -> Post:
        """Nest ``noice`` under an existing Noice and store the post.

        Raises:
            NotFoundError: If the post or the parent Noice does not exist
        """
        with logfire.span(
            "noice_service.react_to_noice",
            post_id=str(post_id),
            parent_noice_id=str(parent_noice_id),
        ):
            post = await self.post_service.get_by_id(post_id)
            try:
                updated = post.react_to_noice(parent_noice_id, noice)
            except NotFoundError:
                logfire.warn(
                    "Reaction to unknown Noice", parent_noice_id=str(parent_noice_id)
                )
                raise
            return await self.post_service.save_post(updated)

    async def add_single_noice(self, post_id: PostId, user_id: UserId) -> None:
        """Record a one-point Noice through the repository's quick path.

        Raises:
            NotFoundError: If the post does not exist
            RepositoryFailureError: If the group's limit was reached
        """
        with logfire.span(
            "noice_service.add_single_noice", post_id=str(post_id), user_id=str(user_id)
        ):
            result = await self.repository.add_noice(post_id, user_id)
            self.unwrap(result, "Post", str(post_id))

    async def remove_noices(self, post_id: PostId, user_id: UserId) -> None:
        """Remove every top-level Noice ``user_id`` gave to a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "noice_service.remove_noices", post_id=str(post_id), user_id=str(user_id)
        ):
            result = await self.repository.remove_noice(post_id, user_id)
            self.unwrap(result, "Post", str(post_id))
            logfire.info("Noices removed", post_id=str(post_id), user_id=str(user_id))

    async def get_noice_count(self, post_id: PostId) -> int:
        """Recursive Noice total of a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("noice_service.get_noice_count", post_id=str(post_id)):
            result = await self.repository.get_noice_count(post_id)
            return self.unwrap(result, "Post", str(post_id))
