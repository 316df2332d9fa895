"""Create post use case."""

import logfire
from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.application.usecase.response import PostResponse
from noiceboard.domain.model import Post
from noiceboard.domain.service import PostGroupService, PostService, UserService
from noiceboard.domain.value import (
    HashtagList,
    PostContent,
    PostGroupPath,
    PostTitle,
    UserId,
)


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    author_id: str  # UUID string
    group_path: str | None = None  # Defaults to the general group
    hashtags: list[str] = []


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        post_group_service: PostGroupService,
        user_service: UserService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            post_group_service: Post group domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.post_group_service = post_group_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Validate every raw field through its value object
        2. Load the author and the target group (both must exist)
        3. Build the Post entity and store it

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the author or group does not exist
        """
        with logfire.span(
            "create_post.execute", title=request.title, group=request.group_path
        ):
            title = PostTitle.create_or_raise(request.title)
            content = PostContent.create_or_raise(request.content)
            author_id = UserId.create_or_raise(request.author_id)
            group_path = (
                PostGroupPath.create_or_raise(request.group_path)
                if request.group_path is not None
                else PostGroupPath.default()
            )
            hashtags = HashtagList.create_or_raise(request.hashtags)

            await self.user_service.get_by_id(author_id)  # Raises NotFoundError
            await self.post_group_service.get_group(group_path)  # Raises NotFoundError

            post = Post.create_new(
                title=title,
                content=content,
                author_id=author_id,
                group_path=group_path,
                hashtags=hashtags,
            )
            saved = await self.post_service.create_post(post)

            logfire.info(
                "Post created successfully",
                post_id=str(saved.id),
                group=saved.group_path.value,
            )
            return PostResponse.from_domain(saved)
