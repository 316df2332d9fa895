"""User domain service."""

import logfire

from noiceboard.domain.model import User
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.value import (
    NoiceAmount,
    UserDisplayName,
    UserId,
    Username,
)

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, repository: NoiceBoardRepository) -> None:
        """Initialize user service.

        Args:
            repository: Noice Board repository
        """
        self.repository = repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            result = await self.repository.get_user(user_id)
            if not result.is_success and result.error.is_not_found:
                logfire.warn("User not found", user_id=str(user_id))
            user = self.unwrap(result, "User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.value)
            return user

    async def list_users(self) -> list[User]:
        with logfire.span("user_service.list_users"):
            return self.unwrap(await self.repository.list_users(), "User", "*")

    async def register_user(
        self, username: str, display_name: str, initial_balance: int
    ) -> User:
        """Create and store a new user.

        Args:
            username: Raw username
            display_name: Raw display name
            initial_balance: Starting Noice balance

        Returns:
            The stored user

        Raises:
            ValidationError: If any input is invalid
        """
        with logfire.span("user_service.register_user", username=username):
            user = User.create_new(
                username=Username.create_or_raise(username),
                display_name=UserDisplayName.create_or_raise(display_name),
                noice_amount=NoiceAmount.create_or_raise(initial_balance),
            )
            await self.save_user(user)
            logfire.info("User registered", user_id=str(user.id))
            return user

    async def save_user(self, user: User) -> User:
        with logfire.span("user_service.save_user", user_id=str(user.id)):
            self.unwrap(await self.repository.update_user(user), "User", str(user.id))
            return user

    async def debit_noice(self, user_id: UserId, amount: NoiceAmount) -> User:
        """Take ``amount`` from a user's balance and store the result.

        Raises:
            NotFoundError: If user not found
            InsufficientNoiceError: If the balance is too small
        """
        with logfire.span(
            "user_service.debit_noice", user_id=str(user_id), amount=amount.value
        ):
            user = await self.get_by_id(user_id)
            updated = user.subtract_noice(amount)
            await self.save_user(updated)
            logfire.info(
                "Noice debited",
                user_id=str(user_id),
                balance=updated.noice_amount.value,
            )
            return updated

    async def credit_noice(self, user_id: UserId, amount: NoiceAmount) -> User:
        """Add ``amount`` to a user's balance and store the result.

        Raises:
            NotFoundError: If user not found
            ValidationError: If the balance would pass the maximum
        """
        with logfire.span(
            "user_service.credit_noice", user_id=str(user_id), amount=amount.value
        ):
            user = await self.get_by_id(user_id)
            updated = user.add_noice(amount)
            await self.save_user(updated)
            return updated

    async def update_display_name(self, user_id: UserId, display_name: str) -> User:
        with logfire.span("user_service.update_display_name", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            return await self.save_user(user.update_display_name(display_name))
