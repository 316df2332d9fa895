"""Repository implementations."""

from noiceboard.persistence.repository.inmemory import (
    InMemoryNoiceBoardRepository,
    seed_demo_data,
)

__all__ = [
    "InMemoryNoiceBoardRepository",
    "seed_demo_data",
]
