#!/usr/bin/env python3
"""Print the Noice Board group tree with Logfire error tracking."""

import asyncio
import sys

import logfire

from noiceboard.application.usecase.group import (
    GetGroupTreeUseCase,
    PostGroupNodeResponse,
)
from noiceboard.config import Settings
from noiceboard.util.di.container import create_container
from noiceboard.util.logging import get_logger, setup_logging
from noiceboard.util.observability import configure_logfire

logger = get_logger(__name__)


def _print_node(node: PostGroupNodeResponse, indent: int = 0) -> None:
    pad = "  " * indent
    print(f"{pad}{node.path} (limit {node.noice_limit})")
    for post in node.posts:
        print(
            f"{pad}  - {post.title} [{post.review_status}] "
            f"noices={post.noice_count} total={post.total_noice_amount}"
        )
    for child in node.children:
        _print_node(child, indent + 1)


async def show_board() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(GetGroupTreeUseCase)
            tree = await use_case.execute()
    finally:
        await container.close()

    for root in tree.roots:
        _print_node(root)
    print(f"{tree.total_groups} groups, {tree.total_posts} posts")


def main() -> int:
    """Build the board and print it, logging any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logger.info("Loading board")
        asyncio.run(show_board())
        return 0

    except Exception as e:
        logfire.error(
            "Failed to show board",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
