"""Base model for all domain entities."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from noiceboard.domain.error import ValidationError
from noiceboard.domain.value.common import first_error_message

M = TypeVar("M", bound="DomainModel")


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    State changes never happen in place: entities return updated copies.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    @classmethod
    def build(cls: type[M], field: str, **data: Any) -> M:
        """Construct the model, translating pydantic errors to domain errors.

        Args:
            field: Field name reported when validation fails
            **data: Model fields

        Raises:
            ValidationError: If any field is invalid
        """
        try:
            return cls(**data)
        except PydanticValidationError as exc:
            raise ValidationError(first_error_message(exc), field=field) from exc
