"""Unit tests for GiveNoiceUseCase."""

import pytest

from noiceboard.application.usecase.noice import GiveNoiceRequest, GiveNoiceUseCase
from noiceboard.config import Settings
from noiceboard.domain.error import (
    InsufficientNoiceError,
    NoiceLimitExceededError,
    NotFoundError,
    RepositoryFailureError,
)
from noiceboard.domain.service import (
    NoiceService,
    PostGroupService,
    PostService,
    UserService,
)
from noiceboard.domain.value import NoiceLimit, PostGroupPath, PostId, UserId
from tests.conftest import PostWriteFailureRepository, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup(unit_env, limit: int = 2, balance: int = 100, group: str = "tech"):
    """Register a giver, a group and a post in that group."""
    user_service = await unit_env.get(UserService)
    group_service = await unit_env.get(PostGroupService)
    post_service = await unit_env.get(PostService)

    giver = await user_service.register_user("bob", "Bob", balance)
    await group_service.register_group(PostGroupPath(group), NoiceLimit(limit))
    post = await post_service.create_post(make_post(group=group))
    return giver, post


class TestGiveNoiceUseCase:
    """Tests for GiveNoiceUseCase."""

    @pytest.mark.asyncio
    async def test_give_noice_success(self, unit_env):
        """A Noice within the limit should debit the giver and raise the total."""
        # Arrange
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver, post = await _setup(unit_env, limit=2)

        request = GiveNoiceRequest(
            post_id=str(post.id),
            user_id=str(giver.id),
            amount=5,
            comment="Great write-up",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.amount == 5
        assert response.post_total == 5
        assert response.balance == 95
        assert response.remaining_quota == 1

        saved = await (await unit_env.get(PostService)).get_by_id(post.id)
        assert saved.noices[0].comment.value == "Great write-up"

    @pytest.mark.asyncio
    async def test_amount_defaults_to_reaction_amount(self, unit_env):
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver, post = await _setup(unit_env)

        response = await use_case.execute(
            GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id), comment="  ")
        )

        assert response.amount == 1
        saved = await (await unit_env.get(PostService)).get_by_id(post.id)
        assert saved.noices[0].comment is None

    @pytest.mark.asyncio
    async def test_limit_reached_keeps_balance(self, unit_env):
        """The third Noice in a group limited to two should be refused untouched."""
        # Arrange
        use_case = await unit_env.get(GiveNoiceUseCase)
        user_service = await unit_env.get(UserService)
        giver, post = await _setup(unit_env, limit=2)
        request = GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id))
        await use_case.execute(request)
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(NoiceLimitExceededError):
            await use_case.execute(request)

        assert (await user_service.get_by_id(giver.id)).noice_amount.value == 98
        saved = await (await unit_env.get(PostService)).get_by_id(post.id)
        assert saved.noice_count() == 2

    @pytest.mark.asyncio
    async def test_limit_is_per_user(self, unit_env):
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver, post = await _setup(unit_env, limit=1)
        other = await (await unit_env.get(UserService)).register_user(
            "carol", "Carol", 10
        )

        await use_case.execute(
            GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id))
        )
        response = await use_case.execute(
            GiveNoiceRequest(post_id=str(post.id), user_id=str(other.id))
        )

        assert response.post_total == 2
        assert response.remaining_quota == 0

    @pytest.mark.asyncio
    async def test_insufficient_balance(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver, post = await _setup(unit_env, balance=3)

        # Act & Assert
        with pytest.raises(InsufficientNoiceError, match="Insufficient balance"):
            await use_case.execute(
                GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id), amount=4)
            )
        saved = await (await unit_env.get(PostService)).get_by_id(post.id)
        assert saved.noices == ()

    @pytest.mark.asyncio
    async def test_unregistered_group_has_no_quota(self, unit_env):
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver = await (await unit_env.get(UserService)).register_user("bob", "Bob", 10)
        post = await (await unit_env.get(PostService)).create_post(
            make_post(group="misc")
        )

        response = await use_case.execute(
            GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id))
        )

        assert response.remaining_quota is None
        assert response.balance == 9

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(GiveNoiceUseCase)
        giver, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Post"):
            await use_case.execute(
                GiveNoiceRequest(post_id=str(PostId.generate()), user_id=str(giver.id))
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GiveNoiceUseCase)
        _, post = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="User"):
            await use_case.execute(
                GiveNoiceRequest(post_id=str(post.id), user_id=str(UserId.generate()))
            )

    @pytest.mark.asyncio
    async def test_failed_store_refunds_debit(self):
        """A post store failure after the debit gives the Noice back."""
        # Arrange
        repository = PostWriteFailureRepository()
        post_service = PostService(repository)
        group_service = PostGroupService(repository)
        user_service = UserService(repository)
        use_case = GiveNoiceUseCase(
            NoiceService(repository, post_service, group_service),
            post_service,
            group_service,
            user_service,
            Settings(_env_file=None),
        )
        giver = await user_service.register_user("bob", "Bob", 100)
        post = make_post()
        await repository.create_post(post)

        # Act & Assert
        with pytest.raises(RepositoryFailureError, match="post store unavailable"):
            await use_case.execute(
                GiveNoiceRequest(post_id=str(post.id), user_id=str(giver.id), amount=7)
            )

        assert (await user_service.get_by_id(giver.id)).noice_amount.value == 100
