# 📄 File: app/modules/rental_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the contracts that say how renters, movies and rentals are looked up and saved,
# without saying which database does it.
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces following the Repository pattern for
# data access abstraction and dependency inversion.
# 🔗 Dependencies:
# Repository interface classes, domain models, typing
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations, presentation dependencies

"""
Rental Management Domain Repositories

Repository Interfaces:
- UserRepository: read access to renters
- MovieRepository: read access to the movie catalogue
- RentalRepository: rental lookup and creation

Concrete implementations live in the infrastructure layer
(SQLAlchemy and in-memory); domain services depend only on these interfaces.
"""

from .movie_repository import MovieRepository
from .rental_repository import RentalRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "MovieRepository",
    "RentalRepository",
]
