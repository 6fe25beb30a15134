# 📄 File: app/modules/rental_management/presentation/api/schemas/rental_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a "rent these movies" request looks like and how rentals are shown back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the rentals API with conversion from domain models.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.rental_management.domain.models (Rental, Movie, RENTAL_LIMITATIONS)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.api.v1.rentals

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.rental_management.domain.models.movie import Movie
from app.modules.rental_management.domain.models.rental import RENTAL_LIMITATIONS, Rental


# =========================================================================
# REQUEST SCHEMAS
# =========================================================================

class CreateRentalRequest(BaseModel):
    """
    Request body for creating a rental.
    """

    user_id: int = Field(..., gt=0, description="Renter ID")
    movie_ids: List[int] = Field(
        ...,
        min_length=RENTAL_LIMITATIONS.MIN,
        max_length=RENTAL_LIMITATIONS.MAX,
        description=f"Between {RENTAL_LIMITATIONS.MIN} and {RENTAL_LIMITATIONS.MAX} movie IDs"
    )
    start_date: Optional[date] = Field(default=None, description="Defaults to today")
    end_date: Optional[date] = Field(
        default=None,
        description=f"Defaults to start_date + {RENTAL_LIMITATIONS.RENTAL_DAYS_OPEN} days"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": 1,
                "movie_ids": [1, 2],
                "start_date": "2024-05-01",
                "end_date": "2024-05-04"
            }
        }
    )


# =========================================================================
# RESPONSE SCHEMAS
# =========================================================================

class MovieResponse(BaseModel):
    """Movie as shown inside a rental."""

    id: int
    name: str
    adults_only: bool

    @classmethod
    def from_domain(cls, movie: Movie) -> "MovieResponse":
        return cls(id=movie.id, name=movie.name, adults_only=movie.adults_only)


class RentalResponse(BaseModel):
    """
    Response schema for a rental.
    """

    id: int
    user_id: int
    start_date: date
    end_date: date
    closed: bool
    movie_ids: List[int]
    movies: List[MovieResponse]

    @classmethod
    def from_domain(cls, rental: Rental) -> "RentalResponse":
        return cls(
            id=rental.id,
            user_id=rental.user_id,
            start_date=rental.start_date,
            end_date=rental.end_date,
            closed=rental.closed,
            movie_ids=rental.movie_ids,
            movies=[MovieResponse.from_domain(movie) for movie in rental.movies],
        )


class RentalListResponse(BaseModel):
    """List of rentals."""

    rentals: List[RentalResponse]
    total: int
