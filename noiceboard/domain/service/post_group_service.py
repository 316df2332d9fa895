"""Post group domain service."""

from dataclasses import dataclass

import logfire

from noiceboard.domain.error import NotFoundError, PostGroupAlreadyExistsError
from noiceboard.domain.model import PostGroup
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.value import NoiceLimit, PostGroupPath, UserId

from .base import Service


@dataclass
class PostGroupNode:
    """Group in the assembled hierarchy, paired with its path."""

    path: PostGroupPath
    group: PostGroup
    children: list["PostGroupNode"]


class PostGroupService(Service):
    """Domain service for the post group hierarchy."""

    def __init__(self, repository: NoiceBoardRepository) -> None:
        """Initialize post group service.

        Args:
            repository: Noice Board repository
        """
        self.repository = repository

    async def get_group(self, path: PostGroupPath) -> PostGroup:
        """Get a group with the posts it holds directly.

        Raises:
            NotFoundError: If no group is registered at ``path``
        """
        with logfire.span("post_group_service.get_group", path=path.value):
            result = await self.repository.get_post_group(path)
            if not result.is_success and result.error.is_not_found:
                logfire.warn("Post group not found", path=path.value)
            return self.unwrap(result, "PostGroup", path.value)

    async def find_group(self, path: PostGroupPath) -> PostGroup | None:
        """Get a group, or None when ``path`` is not registered."""
        try:
            return await self.get_group(path)
        except NotFoundError:
            return None

    async def register_group(
        self, path: PostGroupPath, noice_limit: NoiceLimit
    ) -> PostGroup:
        """Register a group under its parent.

        Args:
            path: Position of the new group
            noice_limit: Per-user Noice limit

        Returns:
            The stored group

        Raises:
            PostGroupAlreadyExistsError: If ``path`` is already registered
            NotFoundError: If the parent path is not registered
            NoiceLimitHierarchyError: If ``noice_limit`` exceeds the parent's
        """
        with logfire.span(
            "post_group_service.register_group",
            path=path.value,
            noice_limit=noice_limit.value,
        ):
            if (await self.repository.get_post_group(path)).is_success:
                logfire.warn("Post group already registered", path=path.value)
                raise PostGroupAlreadyExistsError(path.value)
            group = PostGroup.create(name=path.name, noice_limit=noice_limit)
            if path.parent is not None:
                parent = await self.get_group(path.parent)
                # Raises NoiceLimitHierarchyError
                parent.add_child_group(group)
            self.unwrap(
                await self.repository.save_post_group(path, group),
                "PostGroup",
                path.value,
            )
            logfire.info("Post group registered", path=path.value)
            return group

    async def build_tree(self) -> list[PostGroupNode]:
        """Assemble the group hierarchy from the flat list of paths.

        Groups whose parent path is not registered are treated as roots.

        Returns:
            Root nodes ordered by path

        Raises:
            NoiceLimitHierarchyError: If a stored child allows more than its parent
        """
        with logfire.span("post_group_service.build_tree"):
            paths = self.unwrap(
                await self.repository.list_post_group_paths(), "PostGroup", "*"
            )
            groups = {path: await self.get_group(path) for path in paths}

            # Deepest first so every child is complete before its parent.
            nodes: dict[PostGroupPath, PostGroupNode] = {}
            for path in sorted(paths, key=lambda p: (-p.depth, p.value)):
                group = groups[path]
                children = sorted(
                    (
                        node
                        for child_path, node in nodes.items()
                        if child_path.parent == path
                    ),
                    key=lambda n: n.path.value,
                )
                for child in children:
                    group = group.add_child_group(child.group)
                nodes[path] = PostGroupNode(path=path, group=group, children=children)

            roots = [
                node
                for path, node in nodes.items()
                if path.parent is None or path.parent not in nodes
            ]
            orphans = [n.path.value for n in roots if n.path.parent is not None]
            if orphans:
                logfire.warn("Post groups without a registered parent", paths=orphans)
            logfire.info("Post group tree built", groups=len(nodes), roots=len(roots))
            return sorted(roots, key=lambda n: n.path.value)

    async def remaining_quota(self, path: PostGroupPath, user_id: UserId) -> int:
        """How many more Noices ``user_id`` may give in the group at ``path``."""
        group = await self.get_group(path)
        used = group.count_noice_by_user(user_id)
        return max(group.noice_limit.value - used, 0)
