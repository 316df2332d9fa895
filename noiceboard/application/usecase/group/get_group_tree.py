"""Get post group tree use case."""

from pydantic import BaseModel

from noiceboard.application.usecase.base import BaseUseCase
from noiceboard.domain.service import PostGroupNode, PostGroupService


class PostSummaryResponse(BaseModel):
    """Post listed inside a group node."""

    post_id: str
    title: str
    review_status: str
    noice_count: int
    total_noice_amount: int


class PostGroupNodeResponse(BaseModel):
    """Group node for the tree response.

    Recursive structure mirroring the domain hierarchy.
    """

    path: str
    name: str
    noice_limit: int
    posts: list[PostSummaryResponse]
    children: list["PostGroupNodeResponse"]

    @classmethod
    def from_domain(cls, node: PostGroupNode) -> "PostGroupNodeResponse":
        """Convert a domain PostGroupNode to a response model.

        Args:
            node: Domain group node

        Returns:
            Response model with children recursively converted
        """
        return cls(
            path=node.path.value,
            name=node.group.name.value,
            noice_limit=node.group.noice_limit.value,
            posts=[
                PostSummaryResponse(
                    post_id=str(post.id),
                    title=post.title.value,
                    review_status=post.review_status.value,
                    noice_count=post.noice_count(),
                    total_noice_amount=post.total_noice_amount(),
                )
                for post in node.group.posts
            ],
            children=[cls.from_domain(child) for child in node.children],
        )


class GetGroupTreeResponse(BaseModel):
    """Get group tree response."""

    roots: list[PostGroupNodeResponse]
    total_groups: int
    total_posts: int


class GetGroupTreeUseCase(BaseUseCase):
    """Use case for getting the complete post group hierarchy.

    Groups are stored flat by path; the tree is assembled on every call so
    that the non-increasing limit rule is checked against stored data.
    """

    def __init__(self, post_group_service: PostGroupService) -> None:
        """Initialize get group tree use case.

        Args:
            post_group_service: Post group domain service
        """
        self.post_group_service = post_group_service

    async def execute(self, request: None = None) -> GetGroupTreeResponse:
        """Execute get group tree flow.

        Returns:
            Root groups with nested children and per-post totals

        Raises:
            NoiceLimitHierarchyError: If stored groups break the limit rule
        """
        roots = await self.post_group_service.build_tree()

        total_groups = 0
        total_posts = 0
        for root in roots:
            for group in root.group.walk():
                total_groups += 1
                total_posts += len(group.posts)

        return GetGroupTreeResponse(
            roots=[PostGroupNodeResponse.from_domain(root) for root in roots],
            total_groups=total_groups,
            total_posts=total_posts,
        )
