"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    MissingRequiredListsError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "MissingRequiredListsError",
]
