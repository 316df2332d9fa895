"""Unit tests for PostService."""

import pytest

from noiceboard.domain.error import NotFoundError, RepositoryFailureError
from noiceboard.domain.repository import NoiceBoardRepository, RepositoryErrorCode
from noiceboard.domain.service import PostService
from noiceboard.domain.value import PostContent, PostGroupPath, PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_stores_post(self, unit_env):
        """Creating a post should make it retrievable."""
        # Arrange
        post_service = await unit_env.get(PostService)
        repository = await unit_env.get(NoiceBoardRepository)
        post = make_post()

        # Act
        result = await post_service.create_post(post)

        # Assert
        assert result == post
        assert (await repository.get_post(post.id)).unwrap() == post

    @pytest.mark.asyncio
    async def test_create_duplicate_raises_repository_failure(self, unit_env):
        """Creating the same post twice should surface the repository error."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = make_post()
        await post_service.create_post(post)

        # Act & Assert
        with pytest.raises(RepositoryFailureError) as exc_info:
            await post_service.create_post(post)
        assert exc_info.value.error.code is RepositoryErrorCode.INVALID_DATA


class TestGetPost:
    """Tests for post lookups."""

    @pytest.mark.asyncio
    async def test_get_post_by_id_returns_none_when_missing(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId.generate()) is None

    @pytest.mark.asyncio
    async def test_get_by_id_raises_when_missing(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.get_by_id(PostId.generate())

    @pytest.mark.asyncio
    async def test_list_posts(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_post(group="design"))
        await post_service.create_post(make_post(group="tech"))

        posts = await post_service.list_posts(PostGroupPath("design"))

        assert posts == [post]


class TestSaveAndDelete:
    """Tests for save_post and delete_post methods."""

    @pytest.mark.asyncio
    async def test_save_post_replaces_stored_version(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_post(content="Old"))

        # Act
        await post_service.save_post(post.update_content(PostContent("New")))

        # Assert
        stored = await post_service.get_by_id(post.id)
        assert stored.content.value == "New"

    @pytest.mark.asyncio
    async def test_save_unknown_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.save_post(make_post())

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_post())

        await post_service.delete_post(post.id)

        assert await post_service.get_post_by_id(post.id) is None
