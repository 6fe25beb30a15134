# 📄 File: app/modules/rental_management/application/queries/get_rental.py
# 🧭 Purpose (Layman Explanation):
# Describes the two ways of asking about rentals: all of them, or one by its number.
# 🧪 Purpose (Technical Summary):
# CQRS query models for rental listing and single-rental lookup.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# query_handlers.py, rentals API endpoints

from pydantic import BaseModel, Field


class GetRentalQuery(BaseModel):
    """Query for a single rental by ID."""

    rental_id: int = Field(..., gt=0, description="Rental ID", examples=[1])


class ListRentalsQuery(BaseModel):
    """Query listing every rental."""
