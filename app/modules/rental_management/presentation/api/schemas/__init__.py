# 📄 File: app/modules/rental_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the shapes of rental requests and responses sent over the web.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the rental API schemas.
# 🔗 Dependencies:
# rental_schemas.py
# 🔄 Connected Modules / Calls From:
# rentals.py, API tests

from .rental_schemas import (
    CreateRentalRequest,
    MovieResponse,
    RentalListResponse,
    RentalResponse,
)

__all__ = [
    "CreateRentalRequest",
    "MovieResponse",
    "RentalResponse",
    "RentalListResponse",
]
