"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from noiceboard.config import Settings
from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.persistence.repository import (
    InMemoryNoiceBoardRepository,
    seed_demo_data,
)
from noiceboard.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the in-memory store.

    One store lives for the whole application so every request sees the
    same data.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_repository(
        self, settings: Settings
    ) -> AsyncIterator[NoiceBoardRepository]:
        """Provide the application-wide repository, seeded when configured."""
        repository = InMemoryNoiceBoardRepository()
        if settings.storage.seed_demo_data:
            await seed_demo_data(repository)
        logfire.info("Repository ready", seeded=settings.storage.seed_demo_data)
        yield repository
        logfire.info("Repository released")
