"""
Core utilities package for the Movie Rental Application.
Provides the shared exception hierarchy.
"""

from .exceptions import (
    MovieRentalException,
    ValidationError,
    NotFoundError,
    InsufficientAgeError,
    MovieInRentalError,
    PendentRentalError,
    CollaboratorTimeoutError,
    DatabaseError,
    RepositoryError,
    TransactionError,
)

__all__ = [
    "MovieRentalException",
    "ValidationError",
    "NotFoundError",
    "InsufficientAgeError",
    "MovieInRentalError",
    "PendentRentalError",
    "CollaboratorTimeoutError",
    "DatabaseError",
    "RepositoryError",
    "TransactionError",
]
