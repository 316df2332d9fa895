"""Base class for value objects."""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError

from noiceboard.domain.error import ValidationError
from noiceboard.domain.value.result import (
    Failure,
    Result,
    Success,
    ValidationFailure,
)


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")
V = TypeVar("V", bound="RootValueObject[Any]")


def first_error_message(exc: PydanticValidationError) -> str:
    """Extract the message of the first validation error.

    Custom validators raise ``ValueError``; pydantic keeps the original
    exception in the error context, so its message is reported verbatim
    instead of pydantic's "Value error, ..." rendering.
    """
    error = exc.errors()[0]
    original = error.get("ctx", {}).get("error")
    if original is not None:
        return str(original)
    return error["msg"]


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root or .value)
    - model_dump() automatically returns the primitive value, not a dict
    - Validation lives in the subclass validators and runs on every
      construction path, including create() and create_or_raise()
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    # Machine-readable field name reported in validation failures
    field_name: ClassVar[str] = "value"

    @property
    def value(self) -> T:
        """Return the wrapped primitive."""
        return self.root

    @classmethod
    def create(cls: type[V], raw: Any) -> Result[V, ValidationFailure]:
        """Validate a raw value without raising.

        Args:
            raw: Untrusted primitive

        Returns:
            Success with the value object, or Failure describing the problem
        """
        try:
            return Success(cls.model_validate(raw))
        except PydanticValidationError as exc:
            return Failure(
                ValidationFailure(field=cls.field_name, message=first_error_message(exc))
            )

    @classmethod
    def create_or_raise(cls: type[V], raw: Any) -> V:
        """Validate a raw value, raising on failure.

        Args:
            raw: Untrusted primitive

        Returns:
            The value object

        Raises:
            ValidationError: If the value is invalid
        """
        result = cls.create(raw)
        if isinstance(result, Failure):
            raise ValidationError(result.error.message, field=result.error.field)
        return result.data

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
