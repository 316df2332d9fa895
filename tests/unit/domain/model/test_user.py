"""Unit tests for the User entity."""

import pytest

from noiceboard.domain.error import InsufficientNoiceError, ValidationError
from noiceboard.domain.value import NoiceAmount
from tests.conftest import make_user


class TestBalance:
    """Tests for Noice balance changes."""

    def test_subtract_more_than_balance_raises_and_keeps_original(self):
        # Arrange
        user = make_user(balance=100)

        # Act & Assert
        with pytest.raises(InsufficientNoiceError, match="Insufficient balance"):
            user.subtract_noice(NoiceAmount(150))
        assert user.noice_amount.value == 100

    def test_subtract_returns_new_user(self):
        user = make_user(balance=100)

        updated = user.subtract_noice(NoiceAmount(30))

        assert updated.noice_amount.value == 70
        assert user.noice_amount.value == 100
        assert updated.id == user.id

    def test_subtract_entire_balance(self):
        assert make_user(balance=5).subtract_noice(NoiceAmount(5)).noice_amount.value == 0

    def test_add_noice(self):
        assert make_user(balance=1).add_noice(NoiceAmount(2)).noice_amount.value == 3

    def test_add_noice_past_maximum_raises(self):
        user = make_user(balance=999999)

        with pytest.raises(ValidationError):
            user.add_noice(NoiceAmount(1))

    def test_has_enough_noice(self):
        user = make_user(balance=10)

        assert user.has_enough_noice(NoiceAmount(10))
        assert not user.has_enough_noice(NoiceAmount(11))


class TestDisplayName:
    """Tests for display name updates."""

    def test_update_display_name(self):
        user = make_user()

        updated = user.update_display_name("  New Name  ")

        assert updated.display_name.value == "New Name"
        assert updated.username == user.username

    @pytest.mark.parametrize("raw", ["", "   ", "x" * 101])
    def test_invalid_display_name_raises(self, raw):
        user = make_user()

        with pytest.raises(ValidationError) as exc_info:
            user.update_display_name(raw)

        assert exc_info.value.field == "display_name"
