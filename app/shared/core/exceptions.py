# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types our Movie Rental app uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, session management, middleware, API endpoints

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class MovieRentalException(Exception):
    """
    Base exception class for the Movie Rental Application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(MovieRentalException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=422,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(MovieRentalException):
    """
    Exception raised when requested resource is not found.
    Used for missing users, movies and rentals.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


# =============================================================================
# RENTAL RULE EXCEPTIONS
# =============================================================================

class InsufficientAgeError(MovieRentalException):
    """
    Raised when a renter below the adults age asks for an adults-only movie.
    """

    def __init__(
        self,
        user_id: Optional[int] = None,
        movie_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if user_id is not None:
            details["user_id"] = user_id
        if movie_id is not None:
            details["movie_id"] = movie_id

        super().__init__(
            message="Cannot see that movie.",
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="INSUFFICIENT_AGE"
        )


class MovieInRentalError(MovieRentalException):
    """
    Raised when a requested movie is already attached to an open rental.
    """

    def __init__(
        self,
        movie_id: Optional[int] = None,
        rental_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if movie_id is not None:
            details["movie_id"] = movie_id
        if rental_id is not None:
            details["rental_id"] = rental_id

        super().__init__(
            message="Movie already in a rental.",
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="MOVIE_IN_RENTAL"
        )


class PendentRentalError(MovieRentalException):
    """
    Raised when the renter still holds an open rental.
    """

    def __init__(
        self,
        user_id: Optional[int] = None,
        rental_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if user_id is not None:
            details["user_id"] = user_id
        if rental_id is not None:
            details["rental_id"] = rental_id

        super().__init__(
            message="The user already have a rental!",
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="PENDENT_RENTAL"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class CollaboratorTimeoutError(MovieRentalException):
    """
    Exception raised when a repository call exceeds its time budget.
    """

    def __init__(
        self,
        message: str = "Collaborator call timed out",
        collaborator: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if collaborator:
            details["collaborator"] = collaborator
        if timeout_seconds is not None:
            details["timeout_seconds"] = timeout_seconds

        super().__init__(
            message=message,
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            details=details,
            error_code="COLLABORATOR_TIMEOUT"
        )


class DatabaseError(MovieRentalException):
    """
    Exception raised for database connectivity failures.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(MovieRentalException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class TransactionError(MovieRentalException):
    """
    Exception raised when a database transaction fails.
    Used to wrap unexpected commit/rollback errors in DB sessions.
    """

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="TRANSACTION_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_server_error(exception: Exception) -> bool:
    """
    Check if exception represents a server error (5xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if server error, False otherwise
    """
    if isinstance(exception, (MovieRentalException, HTTPException)):
        return 500 <= exception.status_code < 600

    return True  # Default to server error for unknown exceptions
