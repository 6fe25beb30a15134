# 📄 File: app/modules/rental_management/domain/services/eligibility_service.py
# 🧭 Purpose (Layman Explanation):
# Checks, movie by movie, that the renter is old enough to watch it and that nobody else has it.
# 🧪 Purpose (Technical Summary):
# Pure domain validator applying the age gate then the availability gate to a (User, Movie)
# pair; the reference date comes from an injectable clock.
# 🔗 Dependencies:
# User, Movie, RENTAL_LIMITATIONS, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# rental_service.py (once per requested movie), unit tests

import logging
from datetime import date
from typing import Callable, Optional

from app.shared.core.exceptions import InsufficientAgeError, MovieInRentalError

from ..models.movie import Movie
from ..models.rental import RENTAL_LIMITATIONS
from ..models.user import User

logger = logging.getLogger(__name__)


class EligibilityValidator:
    """
    Decides whether a user may rent one specific movie.

    Gates run in a fixed order and the first failure wins:
    1. Age gate: adults-only movies need ``ADULTS_REQUIRED_AGE`` or more
    2. Availability gate: the movie must not be attached to a rental

    A successful validation has no side effects.
    """

    def __init__(
        self,
        clock: Callable[[], date] = date.today,
        adults_required_age: int = RENTAL_LIMITATIONS.ADULTS_REQUIRED_AGE
    ):
        self._clock = clock
        self._adults_required_age = adults_required_age

    def validate(self, user: User, movie: Movie, today: Optional[date] = None) -> None:
        """
        Validate a single movie for a user.

        Args:
            user: Renter asking for the movie
            movie: Movie as currently stored
            today: Reference date for the age computation, defaults to the clock

        Raises:
            InsufficientAgeError: Adults-only movie and the user is too young
            MovieInRentalError: The movie is already attached to a rental
        """
        self.check_age(user, movie, today)
        self.check_availability(movie)

    def check_age(self, user: User, movie: Movie, today: Optional[date] = None) -> None:
        if not movie.adults_only:
            return

        age = user.age(today or self._clock())
        if age < self._adults_required_age:
            logger.info(
                f"Age gate rejected movie {movie.id} for user {user.id} "
                f"(age {age} < {self._adults_required_age})"
            )
            raise InsufficientAgeError(user_id=user.id, movie_id=movie.id)

    def check_availability(self, movie: Movie) -> None:
        if not movie.is_available:
            logger.info(f"Availability gate rejected movie {movie.id}: attached to rental {movie.rental_id}")
            raise MovieInRentalError(movie_id=movie.id, rental_id=movie.rental_id)
