"""Review post use case."""

import logfire
from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.application.usecase.response import PostResponse
from noiceboard.domain.service import PostService, UserService
from noiceboard.domain.value import PostId, ReviewStatus, UserId


class ReviewPostRequest(BaseModel):
    """Review post request."""

    post_id: str  # UUID string
    reviewer_id: str  # User ID of the moderator
    status: str  # PENDING, SCHEDULED, AS_IS or COMPLETED
    comment: str | None = None  # Optional review note


class ReviewPostUseCase(BaseUseCase):
    """Use case for moving a post through the review workflow."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize review post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ReviewPostRequest) -> PostResponse:
        """Execute review flow.

        The status and the optional note are applied together; if the note is
        invalid nothing is stored.

        Raises:
            NotFoundError: If the post or the reviewer does not exist
            ValidationError: If the status is unknown or the note is invalid
        """
        post_id = PostId.create_or_raise(request.post_id)
        reviewer_id = UserId.create_or_raise(request.reviewer_id)
        status = ReviewStatus.create_or_raise(request.status)

        with logfire.span(
            "review_post.execute", post_id=request.post_id, status=status.value
        ):
            await self.user_service.get_by_id(reviewer_id)
            post = await self.post_service.get_by_id(post_id)

            updated = post.update_review_status(status)
            if request.comment is not None:
                updated = updated.add_review_comment(request.comment, reviewer_id)

            saved = await self.post_service.save_post(updated)
            logfire.info(
                "Post reviewed",
                post_id=request.post_id,
                status=status.value,
                with_comment=request.comment is not None,
            )
            return PostResponse.from_domain(saved)
