"""Domain services."""

from .base import Service
from .noice_service import NoiceService
from .post_group_service import PostGroupNode, PostGroupService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "NoiceService",
    "PostGroupNode",
    "PostGroupService",
    "PostService",
    "Service",
    "UserService",
]
