"""Unit tests for UserService."""

import pytest

from noiceboard.domain.error import (
    InsufficientNoiceError,
    NotFoundError,
    ValidationError,
)
from noiceboard.domain.service import UserService
from noiceboard.domain.value import NoiceAmount, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUser:
    """Tests for register_user method."""

    @pytest.mark.asyncio
    async def test_register_user_stores_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register_user("alice", "Alice", 100)

        # Assert
        stored = await user_service.get_by_id(user.id)
        assert stored.username.value == "alice"
        assert stored.noice_amount.value == 100

    @pytest.mark.asyncio
    async def test_register_user_rejects_invalid_username(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register_user("a!", "Alice", 100)

        assert await user_service.list_users() == []


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_get_by_id_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId.generate())


class TestBalance:
    """Tests for debit_noice and credit_noice methods."""

    @pytest.mark.asyncio
    async def test_debit_persists_new_balance(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("alice", "Alice", 100)

        await user_service.debit_noice(user.id, NoiceAmount(40))

        assert (await user_service.get_by_id(user.id)).noice_amount.value == 60

    @pytest.mark.asyncio
    async def test_debit_more_than_balance_keeps_stored_balance(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("alice", "Alice", 100)

        # Act & Assert
        with pytest.raises(InsufficientNoiceError):
            await user_service.debit_noice(user.id, NoiceAmount(150))
        assert (await user_service.get_by_id(user.id)).noice_amount.value == 100

    @pytest.mark.asyncio
    async def test_credit(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("alice", "Alice", 1)

        updated = await user_service.credit_noice(user.id, NoiceAmount(9))

        assert updated.noice_amount.value == 10


class TestUpdateDisplayName:
    """Tests for update_display_name method."""

    @pytest.mark.asyncio
    async def test_update_display_name(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("alice", "Alice", 1)

        updated = await user_service.update_display_name(user.id, "Alice Liddell")

        assert updated.display_name.value == "Alice Liddell"
        stored = await user_service.get_by_id(user.id)
        assert stored.display_name.value == "Alice Liddell"
