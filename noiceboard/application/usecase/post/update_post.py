"""Update post use case."""

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.application.usecase.response import PostResponse
from noiceboard.domain.error import NotAuthorizedError
from noiceboard.domain.service import PostService
from noiceboard.domain.value import PostContent, PostId, PostTitle, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = None  # None keeps the current title
    content: str | None = None  # None keeps the current content


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title and content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID and new text

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If the new title or content is invalid
        """
        post_id = PostId.create_or_raise(request.post_id)
        user_id = UserId.create_or_raise(request.user_id)

        # 1. Retrieve existing post
        post = await self.post_service.get_by_id(post_id)

        # 2. Check authorization (user owns post)
        if not post.is_author(user_id):
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        # 3. Apply changes
        title = (
            PostTitle.create_or_raise(request.title)
            if request.title is not None
            else post.title
        )
        content = (
            PostContent.create_or_raise(request.content)
            if request.content is not None
            else post.content
        )
        updated_post = await self.post_service.save_post(post.update(title, content))

        return PostResponse.from_domain(updated_post)
