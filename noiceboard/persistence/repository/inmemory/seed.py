"""Demo data for the in-memory repository."""

from datetime import datetime

import logfire

from noiceboard.domain.model import Noice, Post, PostGroup, User
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.domain.value import (
    HashtagList,
    NoiceAmount,
    NoiceComment,
    NoiceId,
    NoiceLimit,
    PostContent,
    PostGroupName,
    PostGroupPath,
    PostId,
    PostTitle,
    ReviewStatus,
    UserDisplayName,
    UserId,
    Username,
)

# (username, display name, balance, joined)
DEMO_USERS = [
    ("alicedev", "Alice Developer", 100, datetime(2024, 1, 1)),
    ("bobdesigner", "Bob Designer", 150, datetime(2024, 1, 2)),
    ("charliepm", "Charlie PM", 200, datetime(2024, 1, 3)),
]

# (path, limit)
DEMO_GROUPS = [
    ("tech", 50),
    ("design", 30),
    ("general", 20),
]


def _user(username: str, display_name: str, balance: int, joined: datetime) -> User:
    return User(
        id=UserId.generate(),
        username=Username.create_or_raise(username),
        display_name=UserDisplayName.create_or_raise(display_name),
        noice_amount=NoiceAmount.create_or_raise(balance),
        created_at=joined,
    )


def _post(
    title: str,
    content: str,
    author: User,
    group: str,
    hashtags: list[str],
    created: datetime,
) -> Post:
    return Post(
        id=PostId.generate(),
        title=PostTitle.create_or_raise(title),
        content=PostContent.create_or_raise(content),
        author_id=author.id,
        group_path=PostGroupPath.create_or_raise(group),
        hashtags=HashtagList.create_or_raise(hashtags),
        review_status=ReviewStatus.COMPLETED,
        created_at=created,
        updated_at=created,
    )


async def seed_demo_data(repository: NoiceBoardRepository) -> None:
    """Fill ``repository`` with three users, three groups and three posts.

    Raises:
        RuntimeError: If the repository rejects any of the demo records
    """
    with logfire.span("seed_demo_data"):
        alice, bob, charlie = (_user(*row) for row in DEMO_USERS)
        for user in (alice, bob, charlie):
            _check(await repository.update_user(user))

        for path, limit in DEMO_GROUPS:
            group = PostGroup.create(
                name=PostGroupName.create_or_raise(path),
                noice_limit=NoiceLimit.create_or_raise(limit),
            )
            _check(
                await repository.save_post_group(
                    PostGroupPath.create_or_raise(path), group
                )
            )

        react = _post(
            "React 18の新機能まとめ",
            "React 18では、Concurrent Renderingが導入され、"
            "より良いユーザー体験を提供できるようになりました。",
            alice,
            "tech",
            ["#React", "#JavaScript", "#Frontend"],
            datetime(2024, 1, 5),
        )
        react = react.add_noice(
            Noice(
                id=NoiceId.generate(),
                from_user_id=bob.id,
                post_id=react.id,
                amount=NoiceAmount(5),
                comment=NoiceComment.create_or_raise("とても参考になりました！"),
                created_at=datetime(2024, 1, 10),
            )
        )
        design = _post(
            "UIデザインのベストプラクティス",
            "ユーザーファーストなUIデザインを実現するための10のポイントを紹介します。",
            bob,
            "design",
            ["#UI", "#UX", "#Design"],
            datetime(2024, 1, 6),
        )
        management = _post(
            "プロジェクト管理のコツ",
            "アジャイル開発におけるプロジェクト管理の重要なポイントをまとめました。",
            charlie,
            "general",
            ["#ProjectManagement", "#Agile"],
            datetime(2024, 1, 7),
        )
        for post in (react, design, management):
            _check(await repository.create_post(post))

        logfire.info(
            "Seeded demo data", users=3, groups=len(DEMO_GROUPS), posts=3
        )


def _check(result) -> None:
    if not result.is_success:
        raise RuntimeError(f"Failed to seed demo data: {result.error.message}")
