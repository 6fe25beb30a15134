# 📄 File: app/modules/rental_management/infrastructure/memory/repositories.py
# 🧭 Purpose (Layman Explanation):
# A rental desk that keeps everything in memory instead of a database - handy for local runs
# and tests. It still refuses to double-book a movie or a renter.
#
# 🧪 Purpose (Technical Summary):
# In-process store plus User/Movie/Rental repository implementations. Rental creation runs under
# an asyncio.Lock and re-checks movie availability and the open-rental invariant before writing.
#
# 🔗 Dependencies:
# asyncio, domain models and repository interfaces, app.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# app.main (store on app.state), presentation dependencies, tests

import asyncio
import logging
from typing import Dict, List, Optional

from app.modules.rental_management.domain.models.movie import Movie
from app.modules.rental_management.domain.models.rental import Rental, RentalCreationPayload
from app.modules.rental_management.domain.models.user import User
from app.modules.rental_management.domain.repositories.movie_repository import MovieRepository
from app.modules.rental_management.domain.repositories.rental_repository import RentalRepository
from app.modules.rental_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import MovieInRentalError, PendentRentalError

logger = logging.getLogger(__name__)


class InMemoryRentalStore:
    """
    Shared state for the in-memory repositories.

    Domain models are immutable snapshots; the store replaces them on
    every change so callers never observe a half-applied rental.
    """

    def __init__(self):
        self.users: Dict[int, User] = {}
        self.movies: Dict[int, Movie] = {}
        self.rentals: Dict[int, Rental] = {}
        self.lock = asyncio.Lock()
        self._next_rental_id = 1

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_movie(self, movie: Movie) -> Movie:
        self.movies[movie.id] = movie
        return movie

    def add_rental(self, rental: Rental) -> Rental:
        """Seed an existing rental and attach its movies when it is open."""
        rental = rental.model_copy(update={"movies": sorted(rental.movies, key=lambda movie: movie.id)})
        self.rentals[rental.id] = rental
        self._next_rental_id = max(self._next_rental_id, rental.id + 1)

        if rental.is_open:
            for movie in rental.movies:
                stored = self.movies.get(movie.id, movie)
                self.movies[movie.id] = stored.model_copy(update={"rental_id": rental.id})
        return rental

    def next_rental_id(self) -> int:
        rental_id = self._next_rental_id
        self._next_rental_id += 1
        return rental_id

    def clear(self) -> None:
        self.users.clear()
        self.movies.clear()
        self.rentals.clear()
        self._next_rental_id = 1


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by an InMemoryRentalStore."""

    def __init__(self, store: InMemoryRentalStore):
        self._store = store

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.users.get(user_id)


class InMemoryMovieRepository(MovieRepository):
    """MovieRepository backed by an InMemoryRentalStore."""

    def __init__(self, store: InMemoryRentalStore):
        self._store = store

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        return self._store.movies.get(movie_id)


class InMemoryRentalRepository(RentalRepository):
    """RentalRepository backed by an InMemoryRentalStore."""

    def __init__(self, store: InMemoryRentalStore):
        self._store = store

    async def get_rentals(self) -> List[Rental]:
        return [self._store.rentals[rental_id] for rental_id in sorted(self._store.rentals)]

    async def get_by_id(self, rental_id: int) -> Optional[Rental]:
        return self._store.rentals.get(rental_id)

    async def get_by_user_id(self, user_id: int) -> List[Rental]:
        return [rental for rental in await self.get_rentals() if rental.user_id == user_id]

    async def create(self, payload: RentalCreationPayload) -> Rental:
        """
        Store a new open rental and attach its movies.

        Availability and the open-rental rule are checked again under
        the store lock, so of two racing requests only one succeeds.
        Movies are attached once each and kept in id order, matching
        RentalModel.movies.
        """
        async with self._store.lock:
            for rental in self._store.rentals.values():
                if rental.user_id == payload.user_id and rental.is_open:
                    logger.warning(f"Concurrent open rental detected for user {payload.user_id}")
                    raise PendentRentalError(user_id=payload.user_id, rental_id=rental.id)

            movie_ids = sorted(set(payload.movie_ids))
            for movie_id in movie_ids:
                current = self._store.movies.get(movie_id)
                if current is not None and not current.is_available:
                    logger.warning(f"Movie {movie_id} got attached to rental {current.rental_id} concurrently")
                    raise MovieInRentalError(movie_id=movie_id, rental_id=current.rental_id)

            rental_id = self._store.next_rental_id()
            attached: List[Movie] = []
            for movie_id in movie_ids:
                source = self._store.movies.get(movie_id) or next(
                    movie for movie in payload.movies if movie.id == movie_id
                )
                movie = source.model_copy(update={"rental_id": rental_id})
                self._store.movies[movie_id] = movie
                attached.append(movie)

            rental = Rental(
                id=rental_id,
                start_date=payload.start_date,
                end_date=payload.end_date,
                user_id=payload.user_id,
                closed=False,
                movies=attached,
            )
            self._store.rentals[rental_id] = rental

        logger.info(f"Created rental {rental_id} for user {payload.user_id} with movies {movie_ids}")
        return rental
