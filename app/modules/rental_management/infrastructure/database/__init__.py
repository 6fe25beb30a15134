# 📄 File: app/modules/rental_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the PostgreSQL storage for renters, movies and rentals.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# SQLAlchemy, models.py, *_repository_impl.py
# 🔄 Connected Modules / Calls From:
# presentation dependencies, migrations/env.py

from .models import MovieModel, RentalModel, UserModel
from .movie_repository_impl import MovieRepositoryImpl
from .rental_repository_impl import RentalRepositoryImpl
from .user_repository_impl import UserRepositoryImpl

__all__ = [
    "UserModel",
    "MovieModel",
    "RentalModel",
    "UserRepositoryImpl",
    "MovieRepositoryImpl",
    "RentalRepositoryImpl",
]
