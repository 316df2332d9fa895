"""Register post group use case."""

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.config import Settings
from noiceboard.domain.service import PostGroupService
from noiceboard.domain.value import NoiceLimit, PostGroupPath


class RegisterGroupRequest(BaseModel):
    """Register group request."""

    path: str  # e.g. "tech" or "tech/frontend"
    noice_limit: int | None = None  # Defaults to the configured limit


class RegisterGroupResponse(BaseModel):
    """Register group response."""

    path: str
    name: str
    noice_limit: int


class RegisterGroupUseCase(BaseUseCase):
    """Use case for adding a group to the hierarchy."""

    def __init__(
        self, post_group_service: PostGroupService, settings: Settings
    ) -> None:
        """Initialize register group use case.

        Args:
            post_group_service: Post group domain service
            settings: Application settings
        """
        self.post_group_service = post_group_service
        self.settings = settings

    async def execute(self, request: RegisterGroupRequest) -> RegisterGroupResponse:
        """Execute register group flow.

        Raises:
            ValidationError: If the path or limit is invalid
            NotFoundError: If the parent group is not registered
            NoiceLimitHierarchyError: If the limit exceeds the parent's
        """
        path = PostGroupPath.create_or_raise(request.path)
        noice_limit = NoiceLimit.create_or_raise(
            request.noice_limit
            if request.noice_limit is not None
            else self.settings.noice.default_noice_limit
        )

        group = await self.post_group_service.register_group(path, noice_limit)

        return RegisterGroupResponse(
            path=path.value,
            name=group.name.value,
            noice_limit=group.noice_limit.value,
        )
