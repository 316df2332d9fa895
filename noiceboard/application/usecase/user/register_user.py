"""Register user use case."""

from datetime import datetime

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.config import Settings
from noiceboard.domain.service import UserService


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str
    display_name: str


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user_id: str
    username: str
    display_name: str
    noice_amount: int
    created_at: datetime


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating a user with the configured starting balance."""

    def __init__(self, user_service: UserService, settings: Settings) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute register user flow.

        Raises:
            ValidationError: If the username or display name is invalid
        """
        user = await self.user_service.register_user(
            username=request.username,
            display_name=request.display_name,
            initial_balance=self.settings.noice.initial_user_balance,
        )
        return RegisterUserResponse(
            user_id=str(user.id),
            username=user.username.value,
            display_name=user.display_name.value,
            noice_amount=user.noice_amount.value,
            created_at=user.created_at,
        )
