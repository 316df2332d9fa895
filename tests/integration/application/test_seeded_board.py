"""Integration tests against the seeded application-wide store.

These tests resolve the production persistence provider, so the repository
starts with the demo users, groups and posts.
"""

import pytest

from noiceboard.application.usecase.group import GetGroupTreeUseCase
from noiceboard.application.usecase.noice import (
    GiveNoiceRequest,
    GiveNoiceUseCase,
    ReactToNoiceRequest,
    ReactToNoiceUseCase,
)
from noiceboard.domain.service import PostService, UserService
from noiceboard.domain.value import PostGroupPath
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _users_by_name(integration_env) -> dict:
    users = await (await integration_env.get(UserService)).list_users()
    return {user.username.value: user for user in users}


class TestSeededBoardIntegration:
    """End-to-end flows over the demo data."""

    @pytest.mark.asyncio
    async def test_demo_tree(self, integration_env):
        """The demo board has three top-level groups with one post each."""
        # Act
        response = await (await integration_env.get(GetGroupTreeUseCase)).execute()

        # Assert
        assert [root.path for root in response.roots] == ["design", "general", "tech"]
        assert response.total_groups == 3
        assert response.total_posts == 3
        tech = response.roots[2]
        assert tech.noice_limit == 50
        assert tech.posts[0].title == "React 18の新機能まとめ"
        assert tech.posts[0].total_noice_amount == 5

    @pytest.mark.asyncio
    async def test_give_and_react_on_demo_post(self, integration_env):
        # Arrange
        users = await _users_by_name(integration_env)
        alice, bob = users["alicedev"], users["bobdesigner"]
        post_service = await integration_env.get(PostService)
        (react_post,) = await post_service.list_posts(PostGroupPath("tech"))
        bob_noice = react_post.noices[0]

        # Act
        given = await (await integration_env.get(GiveNoiceUseCase)).execute(
            GiveNoiceRequest(post_id=str(react_post.id), user_id=str(alice.id), amount=3)
        )
        reacted = await (await integration_env.get(ReactToNoiceUseCase)).execute(
            ReactToNoiceRequest(
                post_id=str(react_post.id),
                parent_noice_id=str(bob_noice.id),
                user_id=str(alice.id),
                amount=2,
                comment="同感です",
            )
        )

        # Assert
        assert given.post_total == 8
        assert given.remaining_quota == 49
        assert reacted.post_total == 10
        assert reacted.balance == 95
        assert bob.noice_amount.value == 150
        stored = await post_service.get_by_id(react_post.id)
        assert stored.noices[0].noices[0].comment.value == "同感です"
