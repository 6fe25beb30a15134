# 📄 File: app/modules/rental_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the "questions" we can ask about rentals.
# 🧪 Purpose (Technical Summary):
# Queries package initialization implementing the CQRS read side for rental management.
# 🔗 Dependencies:
# pydantic query models
# 🔄 Connected Modules / Calls From:
# query_handlers.py, rentals API endpoints

from .get_rental import GetRentalQuery, ListRentalsQuery

__all__ = ["GetRentalQuery", "ListRentalsQuery"]
