"""Failure values reported by repository implementations."""

from enum import Enum

from noiceboard.domain.value.common import ValueObject


class RepositoryErrorCode(str, Enum):
    """Machine-readable reason a repository call failed."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_DATA = "INVALID_DATA"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    NOICE_LIMIT_EXCEEDED = "NOICE_LIMIT_EXCEEDED"


class RepositoryError(ValueObject):
    """Error returned inside a Failure by repository methods."""

    code: RepositoryErrorCode
    message: str

    @classmethod
    def not_found(cls, resource: str, identifier: str) -> "RepositoryError":
        return cls(
            code=RepositoryErrorCode.NOT_FOUND,
            message=f"{resource} not found: {identifier}",
        )

    @property
    def is_not_found(self) -> bool:
        return self.code == RepositoryErrorCode.NOT_FOUND
