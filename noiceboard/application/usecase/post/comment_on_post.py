"""Comment on post use case."""

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.application.usecase.response import PostResponse
from noiceboard.domain.service import PostService, UserService
from noiceboard.domain.value import PostId, UserId


class CommentOnPostRequest(BaseModel):
    """Comment on post request."""

    post_id: str  # UUID string
    author_id: str  # User ID of the commenter
    content: str


class CommentOnPostUseCase(BaseUseCase):
    """Use case for appending a comment to a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize comment on post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CommentOnPostRequest) -> PostResponse:
        """Execute comment flow.

        Raises:
            NotFoundError: If the post or the commenter does not exist
            ValidationError: If the comment is blank or too long
        """
        post_id = PostId.create_or_raise(request.post_id)
        author_id = UserId.create_or_raise(request.author_id)

        await self.user_service.get_by_id(author_id)
        post = await self.post_service.get_by_id(post_id)

        updated = await self.post_service.save_post(
            post.add_comment(request.content, author_id)
        )
        return PostResponse.from_domain(updated)
