"""Application layer DI providers."""

from dishka import Scope, provide

from noiceboard.application.usecase.group import (
    GetGroupTreeUseCase,
    RegisterGroupUseCase,
)
from noiceboard.application.usecase.noice import GiveNoiceUseCase, ReactToNoiceUseCase
from noiceboard.application.usecase.post import (
    CommentOnPostUseCase,
    CreatePostUseCase,
    ReviewPostUseCase,
    UpdatePostUseCase,
)
from noiceboard.application.usecase.user import RegisterUserUseCase
from noiceboard.config import Settings
from noiceboard.domain.service import (
    NoiceService,
    PostGroupService,
    PostService,
    UserService,
)
from noiceboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        post_group_service: PostGroupService,
        user_service: UserService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            post_group_service=post_group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_on_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CommentOnPostUseCase:
        """Provide comment on post use case."""
        return CommentOnPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_review_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ReviewPostUseCase:
        """Provide review post use case."""
        return ReviewPostUseCase(post_service=post_service, user_service=user_service)

    # Noice use cases
    @provide(scope=Scope.REQUEST)
    def get_give_noice_use_case(
        self,
        noice_service: NoiceService,
        post_service: PostService,
        post_group_service: PostGroupService,
        user_service: UserService,
        settings: Settings,
    ) -> GiveNoiceUseCase:
        """Provide give Noice use case."""
        return GiveNoiceUseCase(
            noice_service=noice_service,
            post_service=post_service,
            post_group_service=post_group_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_react_to_noice_use_case(
        self,
        noice_service: NoiceService,
        user_service: UserService,
        settings: Settings,
    ) -> ReactToNoiceUseCase:
        """Provide react to Noice use case."""
        return ReactToNoiceUseCase(
            noice_service=noice_service, user_service=user_service, settings=settings
        )

    # Group use cases
    @provide(scope=Scope.REQUEST)
    def get_get_group_tree_use_case(
        self, post_group_service: PostGroupService
    ) -> GetGroupTreeUseCase:
        """Provide get group tree use case."""
        return GetGroupTreeUseCase(post_group_service=post_group_service)

    @provide(scope=Scope.REQUEST)
    def get_register_group_use_case(
        self, post_group_service: PostGroupService, settings: Settings
    ) -> RegisterGroupUseCase:
        """Provide register group use case."""
        return RegisterGroupUseCase(
            post_group_service=post_group_service, settings=settings
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, settings: Settings
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service, settings=settings)
