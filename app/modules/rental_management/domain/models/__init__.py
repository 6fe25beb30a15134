# 📄 File: app/modules/rental_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the descriptions of renters, movies and rentals in one place.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the rental management domain models.
# 🔗 Dependencies:
# user.py, movie.py, rental.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, schemas

from .movie import Movie
from .rental import RENTAL_LIMITATIONS, Rental, RentalCreationPayload, RentalLimitations
from .user import User

__all__ = [
    "User",
    "Movie",
    "Rental",
    "RentalCreationPayload",
    "RentalLimitations",
    "RENTAL_LIMITATIONS",
]
