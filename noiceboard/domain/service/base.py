"""Base service class for domain services."""

from typing import TypeVar

import logfire

from noiceboard.domain.error import NotFoundError, RepositoryFailureError
from noiceboard.domain.repository import RepositoryError
from noiceboard.domain.value import Failure, Result

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def unwrap(
        result: Result[T, RepositoryError], resource: str, identifier: str
    ) -> T:
        """Return the data of a repository result or raise the matching error.

        Raises:
            NotFoundError: If the repository reported NOT_FOUND
            RepositoryFailureError: For any other failure
        """
        if isinstance(result, Failure):
            if result.error.is_not_found:
                raise NotFoundError(resource, identifier)
            logfire.error(
                "Repository call failed",
                resource=resource,
                identifier=identifier,
                code=result.error.code.value,
                message=result.error.message,
            )
            raise RepositoryFailureError(result.error)
        return result.data
