"""Tagged success/failure results.

Value object constructors and repository calls report expected failures
through ``Result`` instead of raising, so callers branch on ``is_success``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class ValidationFailure:
    """Why a raw value was rejected.

    Attributes:
        field: Machine-readable name of the rejected field
        message: Human-readable explanation
    """

    field: str
    message: str


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result carrying the produced value."""

    data: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed result carrying the error description."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise RuntimeError(f"Called unwrap() on a failed result: {self.error}")


Result = Union[Success[T], Failure[E]]
