"""PostGroup aggregate.

Groups form a tree. Each group caps how many Noices a single user may place
on the posts it holds directly, and a child's cap never exceeds its parent's.
"""

from typing import Iterable, Iterator, Optional

from noiceboard.domain.error import (
    NoiceLimitExceededError,
    NoiceLimitHierarchyError,
    NotFoundError,
)
from noiceboard.domain.model.common import DomainModel
from noiceboard.domain.model.noice import Noice
from noiceboard.domain.model.post import Post
from noiceboard.domain.value import NoiceLimit, PostGroupName, PostId, UserId


class PostGroup(DomainModel):
    """Named group of posts with a per-user Noice limit."""

    name: PostGroupName
    noice_limit: NoiceLimit
    posts: tuple[Post, ...] = ()
    children: tuple["PostGroup", ...] = ()

    @classmethod
    def create(
        cls,
        name: PostGroupName,
        noice_limit: NoiceLimit,
        posts: Iterable[Post] = (),
        children: Iterable["PostGroup"] = (),
    ) -> "PostGroup":
        """Create a group.

        Children passed here are attached one by one, so the limit hierarchy
        is checked exactly as in add_child_group.

        Raises:
            NoiceLimitHierarchyError: If a child's limit exceeds ``noice_limit``
        """
        group = cls(name=name, noice_limit=noice_limit, posts=tuple(posts))
        for child in children:
            group = group.add_child_group(child)
        return group

    def add_post(self, post: Post) -> "PostGroup":
        return self.model_copy(update={"posts": (*self.posts, post)})

    def add_child_group(self, child: "PostGroup") -> "PostGroup":
        """Attach a child group.

        Raises:
            NoiceLimitHierarchyError: If the child's limit exceeds this group's
        """
        if child.noice_limit > self.noice_limit:
            raise NoiceLimitHierarchyError(
                parent=self.name.value,
                parent_limit=self.noice_limit.value,
                child=child.name.value,
                child_limit=child.noice_limit.value,
            )
        return self.model_copy(update={"children": (*self.children, child)})

    def count_noice_by_user(self, user_id: UserId) -> int:
        """Top-level Noices from ``user_id`` on posts held directly by this group."""
        return sum(len(post.noices_by_user(user_id)) for post in self.posts)

    def can_give_noice(self, user_id: UserId) -> bool:
        return self.noice_limit.allows(self.count_noice_by_user(user_id))

    def give_noice(self, post_id: PostId, noice: Noice) -> "PostGroup":
        """Add a top-level Noice to one of this group's posts.

        The user's count is taken from the current posts every time, then
        compared with the limit before anything changes.

        Raises:
            NotFoundError: If the post is not held directly by this group
            NoiceLimitExceededError: If the giver has reached the limit
        """
        post = self.find_post(post_id)
        if post is None:
            raise NotFoundError("Post", post_id.value)
        if not self.can_give_noice(noice.from_user_id):
            raise NoiceLimitExceededError(
                group=self.name.value,
                user_id=noice.from_user_id.value,
                limit=self.noice_limit.value,
            )
        return self.replace_post(post.add_noice(noice))

    def find_post(self, post_id: PostId) -> Optional[Post]:
        return next((p for p in self.posts if p.id == post_id), None)

    def replace_post(self, post: Post) -> "PostGroup":
        """Swap in a new version of a post held by this group.

        Raises:
            NotFoundError: If no post with the same id is held directly
        """
        if self.find_post(post.id) is None:
            raise NotFoundError("Post", post.id.value)
        posts = tuple(post if p.id == post.id else p for p in self.posts)
        return self.model_copy(update={"posts": posts})

    def find_child(self, name: PostGroupName) -> Optional["PostGroup"]:
        return next((c for c in self.children if c.name == name), None)

    def walk(self) -> Iterator["PostGroup"]:
        """Yield this group and every descendant, depth first."""
        stack: list[PostGroup] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))
