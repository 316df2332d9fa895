"""Mock persistence providers for testing."""

from dishka import Scope, provide

from noiceboard.domain.repository import NoiceBoardRepository
from noiceboard.persistence.repository.inmemory import InMemoryNoiceBoardRepository
from noiceboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an empty in-memory repository.

    Uses REQUEST scope to ensure test isolation - each test gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_repository(self) -> NoiceBoardRepository:
        """Provide an empty in-memory repository."""
        return InMemoryNoiceBoardRepository()
