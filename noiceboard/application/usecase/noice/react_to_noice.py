"""React to Noice use case."""

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.application.usecase.response import NoiceResponse
from noiceboard.config import Settings
from noiceboard.domain.error import NotFoundError, RepositoryFailureError
from noiceboard.domain.service import NoiceService, UserService
from noiceboard.domain.value import NoiceAmount, NoiceId, PostId, UserId


class ReactToNoiceRequest(BaseModel):
    """React to Noice request."""

    post_id: str  # UUID string
    parent_noice_id: str  # Noice being reacted to, at any depth
    user_id: str  # User giving the reaction
    amount: int | None = None  # Defaults to the configured reaction amount
    comment: str | None = None


class ReactToNoiceResponse(BaseModel):
    """React to Noice response."""

    noice_id: str
    post_total: int
    balance: int
    thread: list[NoiceResponse]  # Top-level Noices of the post after the reaction


class ReactToNoiceUseCase(BaseUseCase):
    """Use case for nesting a Noice under an existing Noice.

    Reactions spend the giver's balance like any Noice but do not count
    toward the group limit, which only tracks top-level Noices.
    """

    def __init__(
        self,
        noice_service: NoiceService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize react to Noice use case.

        Args:
            noice_service: Noice domain service
            user_service: User domain service
            settings: Application settings
        """
        self.noice_service = noice_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ReactToNoiceRequest) -> ReactToNoiceResponse:
        """Execute reaction flow.

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the post, parent Noice or user does not exist
            InsufficientNoiceError: If the user's balance is too small
        """
        post_id = PostId.create_or_raise(request.post_id)
        parent_noice_id = NoiceId.create_or_raise(request.parent_noice_id)
        user_id = UserId.create_or_raise(request.user_id)
        amount = NoiceAmount.create_or_raise(
            request.amount
            if request.amount is not None
            else self.settings.noice.reaction_amount
        )

        noice = self.noice_service.build_noice(
            user_id, post_id, amount, request.comment
        )
        user = await self.user_service.debit_noice(user_id, amount)
        try:
            post = await self.noice_service.react_to_noice(
                post_id, parent_noice_id, noice
            )
        except (NotFoundError, RepositoryFailureError):
            await self.user_service.credit_noice(user_id, amount)
            raise

        return ReactToNoiceResponse(
            noice_id=str(noice.id),
            post_total=post.total_noice_amount(),
            balance=user.noice_amount.value,
            thread=[NoiceResponse.from_domain(n) for n in post.noices],
        )
