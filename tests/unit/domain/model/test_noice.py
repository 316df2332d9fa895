"""Unit tests for the Noice aggregate."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from noiceboard.domain.error import NotFoundError, ValidationError
from noiceboard.domain.model import Noice
from noiceboard.domain.value import NoiceAmount, NoiceId, PostId, UserId


def _noice(amount: int, user_id: UserId | None = None, post_id: PostId | None = None):
    return Noice.create_new(
        from_user_id=user_id or UserId.generate(),
        post_id=post_id or PostId.generate(),
        amount=NoiceAmount(amount),
    )


class TestCreate:
    """Tests for Noice constructors."""

    def test_create_new_has_no_comment_or_children(self):
        noice = _noice(5)

        assert noice.comment is None
        assert noice.noices == ()
        assert not noice.has_comment()

    def test_create_with_comment_stores_trimmed(self):
        noice = Noice.create_new_with_comment(
            UserId.generate(), PostId.generate(), NoiceAmount(1), "  Great post!  "
        )

        assert noice.has_comment()
        assert noice.comment.value == "Great post!"

    @pytest.mark.parametrize("comment", ["", "   ", "x" * 201])
    def test_create_with_invalid_comment_raises(self, comment):
        with pytest.raises(ValidationError):
            Noice.create_new_with_comment(
                UserId.generate(), PostId.generate(), NoiceAmount(1), comment
            )

    def test_comment_of_200_chars_accepted(self):
        noice = Noice.create_new_with_comment(
            UserId.generate(), PostId.generate(), NoiceAmount(1), "x" * 200
        )

        assert len(noice.comment.value) == 200


class TestTotalAmount:
    """Tests for recursive aggregation."""

    def test_nested_chain_totals_every_level(self):
        # Arrange
        grandchild = _noice(20)
        child = _noice(50).add_noice(grandchild)
        root = _noice(100).add_noice(child)

        # Act
        total = root.total_amount()

        # Assert
        assert total == 170

    def test_total_is_own_amount_plus_children(self):
        root = _noice(3).add_noice(_noice(4)).add_noice(_noice(5).add_noice(_noice(6)))

        expected = root.amount.value + sum(n.total_amount() for n in root.noices)
        assert root.total_amount() == expected == 18

    def test_deep_tree_does_not_hit_recursion_limit(self):
        noice = _noice(1)
        for _ in range(3000):
            noice = _noice(1).add_noice(noice)

        assert noice.total_amount() == 3001


class TestAddNoice:
    """Tests for nesting reactions."""

    def test_add_noice_leaves_receiver_untouched(self):
        parent = _noice(1)
        child = _noice(2)

        updated = parent.add_noice(child)

        assert parent.noices == ()
        assert updated.noices == (child,)
        assert updated.nested_count() == 1
        assert updated.same_identity_as(parent)

    def test_add_nested_noice_reaches_descendant(self):
        # Arrange
        grandchild = _noice(1)
        child = _noice(1).add_noice(grandchild)
        root = _noice(1).add_noice(child)
        reply = _noice(7)

        # Act
        updated = root.add_nested_noice(grandchild.id, reply)

        # Assert
        assert updated.noices[0].noices[0].noices == (reply,)
        assert updated.total_amount() == root.total_amount() + 7
        assert root.noices[0].noices[0].noices == ()

    def test_add_nested_noice_unknown_parent_raises(self):
        with pytest.raises(NotFoundError):
            _noice(1).add_nested_noice(NoiceId.generate(), _noice(1))


class TestQueries:
    """Tests for helper queries."""

    def test_noices_by_user_only_direct_children(self):
        user_id = UserId.generate()
        nested_from_user = _noice(1, user_id=user_id)
        root = (
            _noice(1)
            .add_noice(_noice(1, user_id=user_id))
            .add_noice(_noice(1).add_noice(nested_from_user))
        )

        assert len(root.noices_by_user(user_id)) == 1

    def test_is_from_user_and_is_to_post(self):
        user_id = UserId.generate()
        post_id = PostId.generate()
        noice = _noice(1, user_id=user_id, post_id=post_id)

        assert noice.is_from_user(user_id)
        assert noice.is_to_post(post_id)
        assert not noice.is_from_user(UserId.generate())

    def test_frozen(self):
        noice = _noice(1)

        with pytest.raises(PydanticValidationError):
            noice.amount = NoiceAmount(2)
