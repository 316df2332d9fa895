"""Noice aggregate.

A Noice is a weighted reaction to a post. Noices can themselves receive
Noices, forming a tree whose total is the sum of every amount in it.
"""

from datetime import datetime
from typing import Iterator, Optional

from pydantic import Field

from noiceboard.domain.error import NotFoundError, ValidationError
from noiceboard.domain.model.common import DomainModel
from noiceboard.domain.value import NoiceAmount, NoiceComment, NoiceId, PostId, UserId


class Noice(DomainModel):
    """Weighted reaction to a post, with optional nested reactions."""

    id: NoiceId
    from_user_id: UserId
    post_id: PostId
    amount: NoiceAmount
    comment: Optional[NoiceComment] = None
    created_at: datetime = Field(default_factory=datetime.now)
    noices: tuple["Noice", ...] = ()

    @classmethod
    def create_new(
        cls, from_user_id: UserId, post_id: PostId, amount: NoiceAmount
    ) -> "Noice":
        """Create a Noice without a comment or nested reactions."""
        return cls(
            id=NoiceId.generate(),
            from_user_id=from_user_id,
            post_id=post_id,
            amount=amount,
        )

    @classmethod
    def create_new_with_comment(
        cls,
        from_user_id: UserId,
        post_id: PostId,
        amount: NoiceAmount,
        comment: str,
    ) -> "Noice":
        """Create a Noice carrying a short message.

        Args:
            from_user_id: User giving the Noice
            post_id: Post receiving the Noice
            amount: Weight of the Noice
            comment: Message, stored trimmed

        Returns:
            New Noice with no nested reactions

        Raises:
            ValidationError: If the comment is blank or longer than 200
                characters. Use create_new for a Noice without a comment.
        """
        if not comment.strip():
            raise ValidationError(
                "Noice comment must not be empty; use create_new instead",
                field=NoiceComment.field_name,
            )
        return cls(
            id=NoiceId.generate(),
            from_user_id=from_user_id,
            post_id=post_id,
            amount=amount,
            comment=NoiceComment.create_or_raise(comment),
        )

    def add_noice(self, noice: "Noice") -> "Noice":
        """Return a copy with ``noice`` appended to the nested reactions."""
        return self.model_copy(update={"noices": (*self.noices, noice)})

    def add_nested_noice(self, parent_id: NoiceId, noice: "Noice") -> "Noice":
        """Attach ``noice`` under the reaction ``parent_id`` anywhere in this tree.

        Raises:
            NotFoundError: If no Noice in the tree has ``parent_id``
        """
        if self.id == parent_id:
            return self.add_noice(noice)
        for index, child in enumerate(self.noices):
            if child.id == parent_id or child.contains(parent_id):
                updated = child.add_nested_noice(parent_id, noice)
                noices = (*self.noices[:index], updated, *self.noices[index + 1 :])
                return self.model_copy(update={"noices": noices})
        raise NotFoundError("Noice", parent_id.value)

    def iter_tree(self) -> Iterator["Noice"]:
        """Yield this Noice and every nested reaction, depth first."""
        stack: list[Noice] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.noices))

    def contains(self, noice_id: NoiceId) -> bool:
        return any(n.id == noice_id for n in self.iter_tree())

    def total_amount(self) -> int:
        """Own amount plus the totals of all nested reactions."""
        return sum(n.amount.value for n in self.iter_tree())

    def noices_by_user(self, user_id: UserId) -> list["Noice"]:
        """Direct nested reactions given by ``user_id``."""
        return [n for n in self.noices if n.from_user_id == user_id]

    def is_from_user(self, user_id: UserId) -> bool:
        return self.from_user_id == user_id

    def is_to_post(self, post_id: PostId) -> bool:
        return self.post_id == post_id

    def has_comment(self) -> bool:
        return self.comment is not None

    def nested_count(self) -> int:
        return len(self.noices)

    def same_identity_as(self, other: "Noice") -> bool:
        return self.id == other.id
