# 📄 File: app/modules/rental_management/infrastructure/memory/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the in-memory storage used when no database is configured.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the in-memory store and repositories.
# 🔗 Dependencies:
# repositories.py
# 🔄 Connected Modules / Calls From:
# app.main, presentation dependencies, tests

from .repositories import (
    InMemoryMovieRepository,
    InMemoryRentalRepository,
    InMemoryRentalStore,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryRentalStore",
    "InMemoryUserRepository",
    "InMemoryMovieRepository",
    "InMemoryRentalRepository",
]
