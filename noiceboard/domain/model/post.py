"""Post aggregate root.

Posts live in a post group, carry hashtags, collect Noices and comments,
and move through a review workflow.
"""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import Field

from noiceboard.domain.error import NotFoundError
from noiceboard.domain.model.comment import Comment, ReviewComment
from noiceboard.domain.model.common import DomainModel
from noiceboard.domain.model.noice import Noice
from noiceboard.domain.value import (
    Hashtag,
    HashtagList,
    NoiceId,
    PostContent,
    PostGroupPath,
    PostId,
    PostTitle,
    ReviewStatus,
    UserId,
)


class Post(DomainModel):
    """Post aggregate root.

    Review comments, comments and top-level Noices are append-only.
    ``updated_at`` moves forward on every change except Noice additions.
    """

    id: PostId
    title: PostTitle
    content: PostContent
    author_id: UserId
    group_path: PostGroupPath = Field(default_factory=PostGroupPath.default)
    hashtags: HashtagList = Field(default_factory=HashtagList.empty)
    review_status: ReviewStatus = ReviewStatus.PENDING
    review_comments: tuple[ReviewComment, ...] = ()
    comments: tuple[Comment, ...] = ()
    noices: tuple[Noice, ...] = ()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def create_new(
        cls,
        title: PostTitle,
        content: PostContent,
        author_id: UserId,
        group_path: Optional[PostGroupPath] = None,
        hashtags: Optional[HashtagList] = None,
    ) -> "Post":
        """Create a pending post with no reactions.

        Defaults to the ``general`` group and an empty hashtag list.
        """
        now = datetime.now()
        return cls(
            id=PostId.generate(),
            title=title,
            content=content,
            author_id=author_id,
            group_path=group_path or PostGroupPath.default(),
            hashtags=hashtags or HashtagList.empty(),
            created_at=now,
            updated_at=now,
        )

    def _touch(self, **changes) -> "Post":
        return self.model_copy(update={**changes, "updated_at": datetime.now()})

    def update_title(self, title: PostTitle) -> "Post":
        return self._touch(title=title)

    def update_content(self, content: PostContent) -> "Post":
        return self._touch(content=content)

    def update(self, title: PostTitle, content: PostContent) -> "Post":
        return self._touch(title=title, content=content)

    def add_noice(self, noice: Noice) -> "Post":
        """Append a top-level Noice.

        Group quotas are not checked here; go through PostGroup.give_noice
        when the post belongs to a group.
        """
        return self.model_copy(update={"noices": (*self.noices, noice)})

    def react_to_noice(self, parent_noice_id: NoiceId, noice: Noice) -> "Post":
        """Nest ``noice`` under an existing Noice of this post.

        Raises:
            NotFoundError: If no Noice on this post has ``parent_noice_id``
        """
        for index, top in enumerate(self.noices):
            if top.contains(parent_noice_id):
                updated = top.add_nested_noice(parent_noice_id, noice)
                noices = (*self.noices[:index], updated, *self.noices[index + 1 :])
                return self.model_copy(update={"noices": noices})
        raise NotFoundError("Noice", parent_noice_id.value)

    def total_noice_amount(self) -> int:
        """Sum of the recursive totals of all top-level Noices."""
        return sum(noice.total_amount() for noice in self.noices)

    def update_review_status(self, status: ReviewStatus) -> "Post":
        return self._touch(review_status=status)

    def add_review_comment(self, content: str, reviewer_id: UserId) -> "Post":
        """Append a review comment.

        Raises:
            ValidationError: If the content is blank or longer than 500 characters
        """
        review_comment = ReviewComment.create(content, reviewer_id)
        return self._touch(review_comments=(*self.review_comments, review_comment))

    def add_comment(self, content: str, author_id: UserId) -> "Post":
        """Append a comment.

        Raises:
            ValidationError: If the content is blank or longer than 1000 characters
        """
        comment = Comment.create(content, author_id)
        return self._touch(comments=(*self.comments, comment))

    def add_hashtag(self, tag: "str | Hashtag") -> "Post":
        """Add a hashtag. Adding one already present is a no-op apart from the timestamp.

        Raises:
            ValidationError: If ``tag`` is not a valid hashtag
        """
        return self._touch(hashtags=self.hashtags.add(tag))

    def remove_hashtag(self, tag: "str | Hashtag") -> "Post":
        return self._touch(hashtags=self.hashtags.remove(tag))

    def replace_hashtags(self, tags: Iterable["str | Hashtag"]) -> "Post":
        """Replace all hashtags, de-duplicating in order.

        Raises:
            ValidationError: If any tag is not a valid hashtag
        """
        hashtags = HashtagList.empty()
        for tag in tags:
            hashtags = hashtags.add(tag)
        return self._touch(hashtags=hashtags)

    def noices_by_user(self, user_id: UserId) -> list[Noice]:
        return [n for n in self.noices if n.from_user_id == user_id]

    def comments_by_user(self, user_id: UserId) -> list[Comment]:
        return [c for c in self.comments if c.author_id == user_id]

    def review_comments_by_reviewer(self, reviewer_id: UserId) -> list[ReviewComment]:
        return [c for c in self.review_comments if c.reviewer_id == reviewer_id]

    def has_hashtag(self, tag: "str | Hashtag") -> bool:
        return self.hashtags.contains(tag)

    def is_author(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def noice_count(self) -> int:
        return len(self.noices)

    def comment_count(self) -> int:
        return len(self.comments)
