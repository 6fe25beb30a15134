# 📄 File: app/modules/rental_management/domain/services/rental_service.py
# 🧭 Purpose (Layman Explanation):
# The rental desk: it finds the renter and each movie they picked, runs every rule,
# and only writes the rental down when everything checks out.
# 🧪 Purpose (Technical Summary):
# Domain service orchestrating the rental creation pipeline (user lookup, per-movie lookup and
# eligibility validation, pending-rental guard, persistence) plus rental queries. Every
# collaborator await is optionally bounded by a timeout.
# 🔗 Dependencies:
# Domain models, repository interfaces, EligibilityValidator, PendingRentalGuard,
# app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Application command/query handlers, presentation dependencies, unit tests

import asyncio
from datetime import date, timedelta
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from app.shared.core.exceptions import (
    CollaboratorTimeoutError,
    MovieRentalException,
    NotFoundError,
    ValidationError,
)
from app.shared.utils.logging import get_logger

from ..models.movie import Movie
from ..models.rental import RENTAL_LIMITATIONS, Rental, RentalCreationPayload
from ..models.user import User
from ..repositories.movie_repository import MovieRepository
from ..repositories.rental_repository import RentalRepository
from ..repositories.user_repository import UserRepository
from .eligibility_service import EligibilityValidator
from .pending_rental_guard import PendingRentalGuard

logger = get_logger(__name__)

T = TypeVar("T")


class RentalService:
    """
    Domain service for rental creation and lookup.

    Creation runs as a single sequence with a fixed order:
    user lookup, then for each requested movie a lookup followed by the
    eligibility validator, then the pending-rental guard, then persistence.
    The first failure aborts the attempt and nothing is persisted.

    IMPORTANT: This is a domain service class used for business logic only.
    Always return schemas from API endpoints, not domain service instances.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        movie_repository: MovieRepository,
        rental_repository: RentalRepository,
        eligibility_validator: Optional[EligibilityValidator] = None,
        pending_rental_guard: Optional[PendingRentalGuard] = None,
        clock: Callable[[], date] = date.today,
        collaborator_timeout: Optional[float] = None
    ):
        self.user_repository = user_repository
        self.movie_repository = movie_repository
        self.rental_repository = rental_repository
        self.eligibility_validator = eligibility_validator or EligibilityValidator(clock=clock)
        self.pending_rental_guard = pending_rental_guard or PendingRentalGuard(rental_repository)
        self.clock = clock
        self.collaborator_timeout = collaborator_timeout

    # =========================================================================
    # RENTAL CREATION
    # =========================================================================

    async def create_rental(
        self,
        user_id: int,
        movie_ids: Sequence[int],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> Rental:
        """
        Create a rental after every business rule passed.

        Args:
            user_id: Renter ID
            movie_ids: Requested movies, validated in the given order (duplicates kept)
            start_date: First day of the rental, defaults to today
            end_date: Last day of the rental, defaults to start_date + RENTAL_DAYS_OPEN

        Returns:
            Rental: The rental returned by the repository, unchanged

        Raises:
            NotFoundError: User or one of the movies does not exist
            InsufficientAgeError: Adults-only movie requested by a minor
            MovieInRentalError: A movie is already attached to a rental
            PendentRentalError: The user still holds an open rental
            CollaboratorTimeoutError: A repository call exceeded its time budget
            ValidationError: Movie count outside RENTAL_LIMITATIONS or end_date before start_date
        """
        today = self.clock()
        start_date = start_date or today
        end_date = end_date or start_date + timedelta(days=RENTAL_LIMITATIONS.RENTAL_DAYS_OPEN)

        if not RENTAL_LIMITATIONS.MIN <= len(movie_ids) <= RENTAL_LIMITATIONS.MAX:
            raise ValidationError(
                f"Between {RENTAL_LIMITATIONS.MIN} and {RENTAL_LIMITATIONS.MAX} movies are required",
                field="movie_ids",
                value=len(movie_ids)
            )
        if end_date < start_date:
            raise ValidationError(
                "end_date must not be before start_date",
                field="end_date",
                value=end_date
            )

        logger.info(f"Starting rental creation for user {user_id} with movies {list(movie_ids)}")

        try:
            user = await self._get_user(user_id)
            movies = await self._resolve_movies(user, movie_ids, today)

            await self._call(
                "rental_repository.get_by_user_id",
                self.pending_rental_guard.ensure_no_open_rental(user.id)
            )

            payload = RentalCreationPayload(
                user_id=user.id,
                movies=movies,
                start_date=start_date,
                end_date=end_date,
            )
            rental = await self._call("rental_repository.create", self.rental_repository.create(payload))

        except MovieRentalException as e:
            logger.log_business_event(
                "rental_rejected",
                f"Rental rejected for user {user_id}: {e.message}",
                entity_id=user_id,
                entity_type="user",
                extra={"error_code": e.error_code, "movie_ids": list(movie_ids)}
            )
            raise

        logger.log_business_event(
            "rental_created",
            f"Rental {rental.id} created for user {user_id}",
            entity_id=rental.id,
            entity_type="rental",
            extra={"user_id": user_id, "movie_ids": rental.movie_ids}
        )
        return rental

    async def _get_user(self, user_id: int) -> User:
        user = await self._call("user_repository.get_by_id", self.user_repository.get_by_id(user_id))
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    async def _resolve_movies(self, user: User, movie_ids: Sequence[int], today: date) -> List[Movie]:
        movies: List[Movie] = []

        for movie_id in movie_ids:
            movie = await self._call("movie_repository.get_by_id", self.movie_repository.get_by_id(movie_id))
            if movie is None:
                raise NotFoundError("Movie not found", resource_type="movie", resource_id=movie_id)

            self.eligibility_validator.validate(user, movie, today)
            movies.append(movie)

        return movies

    # =========================================================================
    # RENTAL QUERIES
    # =========================================================================

    async def get_rentals(self) -> List[Rental]:
        """List every rental."""
        return await self._call("rental_repository.get_rentals", self.rental_repository.get_rentals())

    async def get_rental_by_id(self, rental_id: int) -> Rental:
        """
        Fetch one rental.

        Raises:
            NotFoundError: No rental with this ID
        """
        rental = await self._call("rental_repository.get_by_id", self.rental_repository.get_by_id(rental_id))
        if rental is None:
            raise NotFoundError("Rental not found", resource_type="rental", resource_id=rental_id)
        return rental

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _call(self, collaborator: str, awaitable: Awaitable[T]) -> T:
        """Await a collaborator, bounded by ``collaborator_timeout`` when set."""
        if self.collaborator_timeout is None:
            return await awaitable

        try:
            return await asyncio.wait_for(awaitable, timeout=self.collaborator_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"{collaborator} exceeded {self.collaborator_timeout}s")
            raise CollaboratorTimeoutError(
                f"{collaborator} timed out",
                collaborator=collaborator,
                timeout_seconds=self.collaborator_timeout
            ) from e
