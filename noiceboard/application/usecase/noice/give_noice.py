"""Give Noice use case."""

import logfire
from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.config import Settings
from noiceboard.domain.error import (
    NoiceLimitExceededError,
    NotFoundError,
    RepositoryFailureError,
)
from noiceboard.domain.service import (
    NoiceService,
    PostGroupService,
    PostService,
    UserService,
)
from noiceboard.domain.value import NoiceAmount, PostId, UserId


class GiveNoiceRequest(BaseModel):
    """Give Noice request."""

    post_id: str  # UUID string
    user_id: str  # User giving the Noice
    amount: int | None = None  # Defaults to the configured reaction amount
    comment: str | None = None  # Blank comments are dropped


class GiveNoiceResponse(BaseModel):
    """Give Noice response."""

    noice_id: str
    post_id: str
    amount: int
    post_total: int
    balance: int
    remaining_quota: int | None  # None when the post's group is not registered


class GiveNoiceUseCase(BaseUseCase):
    """Use case for giving a top-level Noice to a post."""

    def __init__(
        self,
        noice_service: NoiceService,
        post_service: PostService,
        post_group_service: PostGroupService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize give Noice use case.

        Args:
            noice_service: Noice domain service
            post_service: Post domain service
            post_group_service: Post group domain service
            user_service: User domain service
            settings: Application settings
        """
        self.noice_service = noice_service
        self.post_service = post_service
        self.post_group_service = post_group_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GiveNoiceRequest) -> GiveNoiceResponse:
        """Execute give Noice flow.

        Steps:
        1. Validate input and build the Noice
        2. Check the group quota against the current posts
        3. Debit the giver's balance
        4. Attach the Noice through the group and store the post

        If step 4 fails, including a failed store, the debit is refunded.

        Args:
            request: Give Noice request

        Returns:
            Give Noice response with updated totals

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the post or user does not exist
            NoiceLimitExceededError: If the user reached the group's limit
            InsufficientNoiceError: If the user's balance is too small
        """
        post_id = PostId.create_or_raise(request.post_id)
        user_id = UserId.create_or_raise(request.user_id)
        raw_amount = (
            request.amount
            if request.amount is not None
            else self.settings.noice.reaction_amount
        )
        amount = NoiceAmount.create_or_raise(raw_amount)

        with logfire.span(
            "give_noice.execute",
            post_id=request.post_id,
            user_id=request.user_id,
            amount=amount.value,
        ):
            noice = self.noice_service.build_noice(
                user_id, post_id, amount, request.comment
            )
            post = await self.post_service.get_by_id(post_id)
            await self.user_service.get_by_id(user_id)

            # 2. Quota
            group = await self.post_group_service.find_group(post.group_path)
            if group is not None and not group.can_give_noice(user_id):
                logfire.warn(
                    "Noice limit reached",
                    user_id=request.user_id,
                    group=post.group_path.value,
                    limit=group.noice_limit.value,
                )
                raise NoiceLimitExceededError(
                    group=group.name.value,
                    user_id=request.user_id,
                    limit=group.noice_limit.value,
                )

            # 3. Balance
            user = await self.user_service.debit_noice(user_id, amount)

            # 4. Attach and persist
            try:
                saved = await self.noice_service.give_noice(post_id, noice)
            except (NoiceLimitExceededError, NotFoundError, RepositoryFailureError):
                logfire.warn("Refunding Noice", user_id=request.user_id)
                await self.user_service.credit_noice(user_id, amount)
                raise

            remaining_quota = None
            if group is not None:
                remaining_quota = await self.post_group_service.remaining_quota(
                    post.group_path, user_id
                )

            logfire.info(
                "Noice given successfully",
                noice_id=str(noice.id),
                post_total=saved.total_noice_amount(),
            )
            return GiveNoiceResponse(
                noice_id=str(noice.id),
                post_id=str(saved.id),
                amount=amount.value,
                post_total=saved.total_noice_amount(),
                balance=user.noice_amount.value,
                remaining_quota=remaining_quota,
            )
