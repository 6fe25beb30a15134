# 📄 File: app/modules/rental_management/domain/models/rental.py
# 🧭 Purpose (Layman Explanation):
# Defines what a rental is - who rented, which movies, from when until when, and whether
# it has been returned - plus the house rules like how many movies fit in one rental.
# 🧪 Purpose (Technical Summary):
# Rental aggregate, the persistence payload handed to the rental repository on creation,
# and the rental limitation constants.
# 🔗 Dependencies:
# pydantic, datetime, typing, movie.py
# 🔄 Connected Modules / Calls From:
# rental_repository.py, pending_rental_guard.py, rental_service.py, commands, schemas

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .movie import Movie


class RentalLimitations(BaseModel):
    """
    Business limits applied to rental requests.

    - MIN / MAX: number of movies accepted in a single request
    - ADULTS_REQUIRED_AGE: minimum age for adults-only movies
    - RENTAL_DAYS_OPEN: default rental length when no end date is given
    """

    model_config = ConfigDict(frozen=True)

    MIN: int = 1
    MAX: int = 4
    ADULTS_REQUIRED_AGE: int = 18
    RENTAL_DAYS_OPEN: int = 3


RENTAL_LIMITATIONS = RentalLimitations()


class Rental(BaseModel):
    """
    Rental domain model.

    A rental is created open (closed=False) and may only ever move to
    closed; movies stay attached to it while it is open.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: date
    end_date: date
    user_id: int
    closed: bool = False
    movies: List[Movie] = Field(default_factory=list)

    @property
    def movie_ids(self) -> List[int]:
        return [movie.id for movie in self.movies]

    @property
    def is_open(self) -> bool:
        return not self.closed


class RentalCreationPayload(BaseModel):
    """
    Fully resolved rental handed to persistence once every check passed.

    Movies keep the order of the request and are not deduplicated.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int
    movies: List[Movie] = Field(..., min_length=1)
    start_date: date
    end_date: date
    closed: bool = False

    @model_validator(mode="after")
    def check_period(self) -> "RentalCreationPayload":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        if self.closed:
            raise ValueError("A rental is always created open")
        return self

    @property
    def movie_ids(self) -> List[int]:
        return [movie.id for movie in self.movies]
