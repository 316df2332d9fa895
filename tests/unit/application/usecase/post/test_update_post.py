"""Unit tests for UpdatePostUseCase."""

import pytest

from noiceboard.application.usecase.post import UpdatePostRequest, UpdatePostUseCase
from noiceboard.domain.error import NotAuthorizedError, NotFoundError
from noiceboard.domain.service import PostService
from noiceboard.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_post_success(self, unit_env):
        """Updating a post by its author should succeed."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_service = await unit_env.get(PostService)
        author_id = UserId.generate()
        post = await post_service.create_post(
            make_post(author_id=author_id, title="Old", content="Old content")
        )

        request = UpdatePostRequest(
            post_id=str(post.id),
            user_id=str(author_id),
            content="Updated content",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.title == "Old"
        assert response.content == "Updated content"
        saved = await post_service.get_by_id(post.id)
        assert saved.content.value == "Updated content"
        assert saved.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_update_post_not_authorized_when_not_author(self, unit_env):
        """Updating a post by someone else should raise NotAuthorizedError."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_post(title="Old"))

        request = UpdatePostRequest(
            post_id=str(post.id), user_id=str(UserId.generate()), title="Hijacked"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(request)
        assert (await post_service.get_by_id(post.id)).title.value == "Old"

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(PostId.generate()),
                    user_id=str(UserId.generate()),
                    title="x",
                )
            )
