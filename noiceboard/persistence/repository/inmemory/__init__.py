"""In-memory repository implementation and demo data."""

from .noice_board import InMemoryNoiceBoardRepository
from .seed import seed_demo_data

__all__ = [
    "InMemoryNoiceBoardRepository",
    "seed_demo_data",
]
