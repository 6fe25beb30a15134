"""
Infrastructure layer package for the Movie Rental Application.
Provides database session management.
"""

__all__ = []
