"""Domain layer DI providers."""

from dishka import Scope, provide

from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.service import (
    NoiceService,
    PostGroupService,
    PostService,
    UserService,
)
from noiceboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped so every unit of work gets fresh
    instances bound to the repository of that scope.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, repository: NoiceBoardRepository) -> PostService:
        """Provide post domain service."""
        return PostService(repository=repository)

    @provide
    def get_post_group_service(
        self, repository: NoiceBoardRepository
    ) -> PostGroupService:
        """Provide post group domain service."""
        return PostGroupService(repository=repository)

    @provide
    def get_user_service(self, repository: NoiceBoardRepository) -> UserService:
        """Provide user domain service."""
        return UserService(repository=repository)

    @provide
    def get_noice_service(
        self,
        repository: NoiceBoardRepository,
        post_service: PostService,
        post_group_service: PostGroupService,
    ) -> NoiceService:
        """Provide Noice domain service."""
        return NoiceService(
            repository=repository,
            post_service=post_service,
            post_group_service=post_group_service,
        )
