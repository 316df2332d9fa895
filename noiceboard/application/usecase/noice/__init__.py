"""Noice use cases."""

from .give_noice import GiveNoiceRequest, GiveNoiceResponse, GiveNoiceUseCase
from .react_to_noice import (
    ReactToNoiceRequest,
    ReactToNoiceResponse,
    ReactToNoiceUseCase,
)

__all__ = [
    "GiveNoiceRequest",
    "GiveNoiceResponse",
    "GiveNoiceUseCase",
    "ReactToNoiceRequest",
    "ReactToNoiceResponse",
    "ReactToNoiceUseCase",
]
