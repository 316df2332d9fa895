"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from noiceboard.domain.repository.base import RepositoryError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised when a raw value fails value object validation at a call site
    that asked for an exception instead of a result.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        self.message = message
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NoiceLimitHierarchyError(BusinessRuleViolationError):
    """Raised when a child group would allow more Noice than its parent."""

    def __init__(self, parent: str, parent_limit: int, child: str, child_limit: int):
        self.parent_limit = parent_limit
        self.child_limit = child_limit
        super().__init__(
            f"Child group {child} has NoiceLimit {child_limit} "
            f"which exceeds parent group {parent} NoiceLimit {parent_limit}"
        )


class PostGroupAlreadyExistsError(BusinessRuleViolationError):
    """Raised when a group is registered at a path that is already taken."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Post group already registered: {path}")


class NoiceLimitExceededError(BusinessRuleViolationError):
    """Raised when a user has used up their Noice quota in a group."""

    def __init__(self, group: str, user_id: str, limit: int):
        self.limit = limit
        super().__init__(
            f"User {user_id} has reached the NoiceLimit {limit} in group {group}"
        )


class InsufficientNoiceError(BusinessRuleViolationError):
    """Raised when a user tries to spend more Noice than they hold."""

    def __init__(self, user_id: str, balance: int, requested: int):
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient balance: user {user_id} holds {balance} Noice, "
            f"requested {requested}"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RepositoryFailureError(DomainError):
    """Raised when the repository port reports an unexpected failure."""

    def __init__(self, error: "RepositoryError"):
        self.error = error
        super().__init__(f"{error.code.value}: {error.message}")
