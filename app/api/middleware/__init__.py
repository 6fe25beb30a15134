# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the middleware that wraps every request, tagging it for the logs and
# turning errors into consistent responses.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components.
# 🔗 Dependencies:
# error_handling.py
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

"""
Movie Rental API Middleware Package

Middleware Components:
    - ErrorHandlingMiddleware: request correlation, timing and centralized error formatting

Usage:
    from app.api.middleware import ErrorHandlingMiddleware

    app.add_middleware(ErrorHandlingMiddleware)
"""

from .error_handling import (
    ErrorHandlingMiddleware,
    create_error_response,
    handle_rental_exception,
    handle_validation_error,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "create_error_response",
    "handle_rental_exception",
    "handle_validation_error",
]
