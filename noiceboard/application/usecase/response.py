"""Response models shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from noiceboard.domain.model import Noice, Post


class NoiceResponse(BaseModel):
    """Noice with its nested reactions.

    Recursive structure mirroring the domain model.
    """

    noice_id: str
    from_user_id: str
    amount: int
    total_amount: int
    comment: str | None
    created_at: datetime
    noices: list["NoiceResponse"]

    @classmethod
    def from_domain(cls, noice: Noice) -> "NoiceResponse":
        return cls(
            noice_id=str(noice.id),
            from_user_id=str(noice.from_user_id),
            amount=noice.amount.value,
            total_amount=noice.total_amount(),
            comment=noice.comment.value if noice.comment else None,
            created_at=noice.created_at,
            noices=[cls.from_domain(child) for child in noice.noices],
        )


class PostResponse(BaseModel):
    """Full view of a post."""

    post_id: str
    title: str
    content: str
    author_id: str
    group_path: str
    hashtags: list[str]
    review_status: str
    total_noice_amount: int
    noices: list[NoiceResponse]
    comment_count: int
    review_comment_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        """Convert a domain Post to a response model.

        Args:
            post: Domain post

        Returns:
            Response model with Noices recursively converted
        """
        return cls(
            post_id=str(post.id),
            title=post.title.value,
            content=post.content.value,
            author_id=str(post.author_id),
            group_path=post.group_path.value,
            hashtags=post.hashtags.as_strings(),
            review_status=post.review_status.value,
            total_noice_amount=post.total_noice_amount(),
            noices=[NoiceResponse.from_domain(n) for n in post.noices],
            comment_count=post.comment_count(),
            review_comment_count=len(post.review_comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
