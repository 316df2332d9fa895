"""User entity."""

from datetime import datetime

from pydantic import Field

from noiceboard.domain.error import InsufficientNoiceError
from noiceboard.domain.model.common import DomainModel
from noiceboard.domain.value import NoiceAmount, UserDisplayName, UserId, Username


class User(DomainModel):
    """Board member with a spendable Noice balance.

    The username never changes; the display name and balance do, always
    through copies.
    """

    id: UserId
    username: Username
    display_name: UserDisplayName
    noice_amount: NoiceAmount
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def create_new(
        cls,
        username: Username,
        display_name: UserDisplayName,
        noice_amount: NoiceAmount,
    ) -> "User":
        return cls(
            id=UserId.generate(),
            username=username,
            display_name=display_name,
            noice_amount=noice_amount,
        )

    def add_noice(self, amount: NoiceAmount) -> "User":
        """Credit the balance.

        Raises:
            ValidationError: If the new balance would exceed the maximum
        """
        return self.model_copy(update={"noice_amount": self.noice_amount.add(amount)})

    def subtract_noice(self, amount: NoiceAmount) -> "User":
        """Debit the balance.

        Raises:
            InsufficientNoiceError: If the balance is smaller than ``amount``
        """
        if not self.has_enough_noice(amount):
            raise InsufficientNoiceError(
                user_id=self.id.value,
                balance=self.noice_amount.value,
                requested=amount.value,
            )
        return self.model_copy(
            update={"noice_amount": self.noice_amount.subtract(amount)}
        )

    def has_enough_noice(self, amount: NoiceAmount) -> bool:
        return self.noice_amount >= amount

    def update_display_name(self, raw: str) -> "User":
        """Change the display name.

        Raises:
            ValidationError: If the name is blank or longer than 100 characters
        """
        display_name = UserDisplayName.create_or_raise(raw)
        return self.model_copy(update={"display_name": display_name})
