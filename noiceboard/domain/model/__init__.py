"""Domain model entities for Noice Board."""

from noiceboard.domain.model.comment import Comment, ReviewComment
from noiceboard.domain.model.noice import Noice
from noiceboard.domain.model.post import Post
from noiceboard.domain.model.post_group import PostGroup
from noiceboard.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Noice",
    "Comment",
    "ReviewComment",
    "PostGroup",
]
