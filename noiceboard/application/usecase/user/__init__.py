"""User use cases."""

from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
