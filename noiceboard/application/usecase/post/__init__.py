"""Post use cases."""

from .comment_on_post import CommentOnPostRequest, CommentOnPostUseCase
from .create_post import CreatePostRequest, CreatePostUseCase
from .review_post import ReviewPostRequest, ReviewPostUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CommentOnPostRequest",
    "CommentOnPostUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "ReviewPostRequest",
    "ReviewPostUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
