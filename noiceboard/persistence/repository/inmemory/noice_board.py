"""In-memory Noice Board repository."""

from typing import List

from noiceboard.domain.error import NoiceLimitExceededError
from noiceboard.domain.model import Noice, Post, PostGroup, User
from noiceboard.domain.repository import (
    NoiceBoardRepository,
    RepositoryError,
    RepositoryErrorCode,
)
from noiceboard.domain.value import (
    Failure,
    NoiceAmount,
    PostGroupPath,
    PostId,
    Result,
    Success,
    UserId,
)

NOICE_AMOUNT_PER_CLICK = 1


class InMemoryNoiceBoardRepository(NoiceBoardRepository):
    """In-memory implementation of NoiceBoardRepository.

    Groups are stored without posts; a group snapshot is assembled from
    the posts whose group_path equals the group's path.
    """

    def __init__(self) -> None:
        self._groups: dict[PostGroupPath, PostGroup] = {}
        self._posts: dict[PostId, Post] = {}
        self._users: dict[UserId, User] = {}

    def _snapshot(self, path: PostGroupPath, group: PostGroup) -> PostGroup:
        posts = tuple(p for p in self._posts.values() if p.group_path == path)
        return group.model_copy(update={"posts": posts, "children": ()})

    async def get_post_group(
        self, path: PostGroupPath
    ) -> Result[PostGroup, RepositoryError]:
        """Get a group with its current posts."""
        group = self._groups.get(path)
        if group is None:
            return Failure(RepositoryError.not_found("PostGroup", path.value))
        return Success(self._snapshot(path, group))

    async def list_post_groups(self) -> Result[List[PostGroup], RepositoryError]:
        """List groups ordered by path."""
        paths = sorted(self._groups, key=lambda p: p.value)
        return Success([self._snapshot(p, self._groups[p]) for p in paths])

    async def list_post_group_paths(
        self,
    ) -> Result[List[PostGroupPath], RepositoryError]:
        """List registered paths, sorted."""
        return Success(sorted(self._groups, key=lambda p: p.value))

    async def save_post_group(
        self, path: PostGroupPath, group: PostGroup
    ) -> Result[None, RepositoryError]:
        """Register a group. A stored group is never replaced."""
        if group.name != path.name:
            return Failure(
                RepositoryError(
                    code=RepositoryErrorCode.INVALID_DATA,
                    message=f"Group name {group.name} does not match path {path}",
                )
            )
        if path in self._groups:
            return Failure(
                RepositoryError(
                    code=RepositoryErrorCode.INVALID_DATA,
                    message=f"Post group already registered: {path}",
                )
            )
        self._groups[path] = group.model_copy(update={"posts": (), "children": ()})
        return Success(None)

    async def get_post(self, post_id: PostId) -> Result[Post, RepositoryError]:
        """Get a post by ID."""
        post = self._posts.get(post_id)
        if post is None:
            return Failure(RepositoryError.not_found("Post", post_id.value))
        return Success(post)

    async def list_posts(
        self, group_path: PostGroupPath
    ) -> Result[List[Post], RepositoryError]:
        """List posts directly in a group."""
        return Success([p for p in self._posts.values() if p.group_path == group_path])

    async def create_post(self, post: Post) -> Result[None, RepositoryError]:
        """Store a new post."""
        if post.id in self._posts:
            return Failure(
                RepositoryError(
                    code=RepositoryErrorCode.INVALID_DATA,
                    message=f"Post already exists: {post.id}",
                )
            )
        self._posts[post.id] = post
        return Success(None)

    async def update_post(self, post: Post) -> Result[None, RepositoryError]:
        """Replace an existing post."""
        if post.id not in self._posts:
            return Failure(RepositoryError.not_found("Post", post.id.value))
        self._posts[post.id] = post
        return Success(None)

    async def delete_post(self, post_id: PostId) -> Result[None, RepositoryError]:
        """Delete an existing post."""
        if post_id not in self._posts:
            return Failure(RepositoryError.not_found("Post", post_id.value))
        del self._posts[post_id]
        return Success(None)

    async def add_noice(
        self, post_id: PostId, user_id: UserId
    ) -> Result[None, RepositoryError]:
        """Add a Noice of amount 1, enforcing the group's limit when registered."""
        post = self._posts.get(post_id)
        if post is None:
            return Failure(RepositoryError.not_found("Post", post_id.value))

        noice = Noice.create_new(
            from_user_id=user_id,
            post_id=post_id,
            amount=NoiceAmount(NOICE_AMOUNT_PER_CLICK),
        )

        group = self._groups.get(post.group_path)
        if group is None:
            self._posts[post_id] = post.add_noice(noice)
            return Success(None)

        try:
            updated_group = self._snapshot(post.group_path, group).give_noice(
                post_id, noice
            )
        except NoiceLimitExceededError as exc:
            return Failure(
                RepositoryError(
                    code=RepositoryErrorCode.NOICE_LIMIT_EXCEEDED, message=str(exc)
                )
            )

        updated_post = updated_group.find_post(post_id)
        if updated_post is None:
            return Failure(
                RepositoryError(
                    code=RepositoryErrorCode.UNEXPECTED_ERROR,
                    message=f"Post vanished from group: {post_id}",
                )
            )
        self._posts[post_id] = updated_post
        return Success(None)

    async def remove_noice(
        self, post_id: PostId, user_id: UserId
    ) -> Result[None, RepositoryError]:
        """Drop every top-level Noice from ``user_id`` on the post."""
        post = self._posts.get(post_id)
        if post is None:
            return Failure(RepositoryError.not_found("Post", post_id.value))
        noices = tuple(n for n in post.noices if not n.is_from_user(user_id))
        self._posts[post_id] = post.model_copy(update={"noices": noices})
        return Success(None)

    async def get_noice_count(self, post_id: PostId) -> Result[int, RepositoryError]:
        """Get the recursive Noice total of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return Failure(RepositoryError.not_found("Post", post_id.value))
        return Success(post.total_noice_amount())

    async def get_user(self, user_id: UserId) -> Result[User, RepositoryError]:
        """Get a user by ID."""
        user = self._users.get(user_id)
        if user is None:
            return Failure(RepositoryError.not_found("User", user_id.value))
        return Success(user)

    async def list_users(self) -> Result[List[User], RepositoryError]:
        """List users in insertion order."""
        return Success(list(self._users.values()))

    async def update_user(self, user: User) -> Result[None, RepositoryError]:
        """Insert or replace a user."""
        self._users[user.id] = user
        return Success(None)
