"""Post group use cases."""

from .get_group_tree import (
    GetGroupTreeResponse,
    GetGroupTreeUseCase,
    PostGroupNodeResponse,
    PostSummaryResponse,
)
from .register_group import (
    RegisterGroupRequest,
    RegisterGroupResponse,
    RegisterGroupUseCase,
)

__all__ = [
    "GetGroupTreeResponse",
    "GetGroupTreeUseCase",
    "PostGroupNodeResponse",
    "PostSummaryResponse",
    "RegisterGroupRequest",
    "RegisterGroupResponse",
    "RegisterGroupUseCase",
]
