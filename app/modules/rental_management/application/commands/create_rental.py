# 📄 File: app/modules/rental_management/application/commands/create_rental.py
# 🧭 Purpose (Layman Explanation):
# Describes a request to rent movies: who is renting, which movies, and for which days.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for rental creation with request-shape validation (movie count limits,
# date ordering).
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.modules.rental_management.domain.models.rental (RENTAL_LIMITATIONS)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.application.handlers.command_handlers (CreateRentalCommandHandler)
# - app.modules.rental_management.presentation.api.v1.rentals (create endpoint)

"""
Create Rental Command

Command Fields:
- user_id: Renter ID
- movie_ids: Requested movies, between MIN and MAX entries, order kept
- start_date: First day of the rental (default: today)
- end_date: Last day of the rental (default: start_date + RENTAL_DAYS_OPEN)

Missing dates stay unset; RentalService fills them from its clock.
Business rules (age, availability, pending rental) are not checked here;
they run in the domain RentalService once the command is handled.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from app.modules.rental_management.domain.models.rental import RENTAL_LIMITATIONS


class CreateRentalCommand(BaseModel):
    """
    Command for creating a rental.
    """

    user_id: int = Field(
        ...,
        gt=0,
        description="Renter ID",
        examples=[1]
    )
    movie_ids: List[int] = Field(
        ...,
        min_length=RENTAL_LIMITATIONS.MIN,
        max_length=RENTAL_LIMITATIONS.MAX,
        description="Requested movie IDs, validated in the given order",
        examples=[[1, 2]]
    )
    start_date: Optional[date] = Field(
        default=None,
        description="First day of the rental (default: today)"
    )
    end_date: Optional[date] = Field(
        default=None,
        description="Last day of the rental (default: start_date + RENTAL_DAYS_OPEN)"
    )

    @model_validator(mode="after")
    def check_period(self) -> "CreateRentalCommand":
        """Check date ordering when both dates are given."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def to_service_kwargs(self) -> Dict[str, Any]:
        """Arguments for RentalService.create_rental."""
        return {
            "user_id": self.user_id,
            "movie_ids": list(self.movie_ids),
            "start_date": self.start_date,
            "end_date": self.end_date,
        }
