"""Unit tests for RegisterUserUseCase."""

import pytest

from noiceboard.application.usecase.user import (
    RegisterUserRequest,
    RegisterUserUseCase,
)
from noiceboard.domain.error import ValidationError
from noiceboard.domain.service import UserService
from noiceboard.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_user_success(self, unit_env):
        """New users start with the configured balance."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        user_service = await unit_env.get(UserService)

        # Act
        response = await use_case.execute(
            RegisterUserRequest(username="  dana42 ", display_name="Dana")
        )

        # Assert
        assert response.username == "dana42"
        assert response.noice_amount == 100
        stored = await user_service.get_by_id(UserId(response.user_id))
        assert stored.display_name.value == "Dana"

    @pytest.mark.asyncio
    async def test_invalid_username(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(username="dana_42", display_name="Dana")
            )

        assert exc_info.value.field == "username"
        assert await (await unit_env.get(UserService)).list_users() == []
