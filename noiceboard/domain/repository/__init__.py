"""Repository interfaces for Noice Board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from noiceboard.domain.repository.base import RepositoryError, RepositoryErrorCode
from noiceboard.domain.repository.noice_board import NoiceBoardRepository

__all__ = [
    "NoiceBoardRepository",
    "RepositoryError",
    "RepositoryErrorCode",
]
