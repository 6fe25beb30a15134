# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the helpful tools that other parts of the app
# use for common tasks like writing log messages.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package with the structured logging helpers
# used across the Movie Rental application.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, domain services

"""
Shared Utilities Package

Provides structured logging with JSON formatting and request context.
"""

from .logging import get_logger, log_context, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
]
