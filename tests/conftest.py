# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared test fixtures: a fixed "today", a handful of renters of different ages,
# and a small movie catalogue.
# 🧪 Purpose (Technical Summary):
# Pytest fixtures building domain objects, a seeded in-memory store and a RentalService
# wired to in-memory repositories with an injected clock.
# 🔗 Dependencies:
# pytest, app.modules.rental_management
# 🔄 Connected Modules / Calls From:
# tests/unit, tests/integration

from datetime import date

import pytest

from app.modules.rental_management.domain.models.movie import Movie
from app.modules.rental_management.domain.models.rental import Rental
from app.modules.rental_management.domain.models.user import User
from app.modules.rental_management.domain.services.rental_service import RentalService
from app.modules.rental_management.infrastructure.memory.repositories import (
    InMemoryMovieRepository,
    InMemoryRentalRepository,
    InMemoryRentalStore,
    InMemoryUserRepository,
)

TODAY = date(2024, 5, 1)


def make_user(user_id: int, birth_date: date) -> User:
    return User(
        id=user_id,
        first_name="Renter",
        last_name=f"Number{user_id}",
        email=f"renter{user_id}@example.com",
        national_id=f"0000000000{user_id}",
        birth_date=birth_date,
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def adult() -> User:
    """25 years old on TODAY."""
    return make_user(1, date(1999, 1, 15))


@pytest.fixture
def minor() -> User:
    """15 years old on TODAY."""
    return make_user(2, date(2009, 3, 10))


@pytest.fixture
def just_eighteen() -> User:
    """Turns 18 exactly on TODAY."""
    return make_user(3, date(2006, 5, 1))


@pytest.fixture
def almost_eighteen() -> User:
    """Turns 18 the day after TODAY."""
    return make_user(4, date(2006, 5, 2))


@pytest.fixture
def regular_movie() -> Movie:
    return Movie(id=10, name="Family Picnic", adults_only=False)


@pytest.fixture
def second_regular_movie() -> Movie:
    return Movie(id=11, name="Space Dogs", adults_only=False)


@pytest.fixture
def adults_movie() -> Movie:
    return Movie(id=20, name="Midnight Heist", adults_only=True)


@pytest.fixture
def rented_movie() -> Movie:
    return Movie(id=30, name="Borrowed Time", adults_only=False, rental_id=500)


@pytest.fixture
def rented_adults_movie() -> Movie:
    return Movie(id=31, name="Noir Alley", adults_only=True, rental_id=500)


@pytest.fixture
def store(
    adult, minor, just_eighteen, almost_eighteen,
    regular_movie, second_regular_movie, adults_movie, rented_movie, rented_adults_movie
) -> InMemoryRentalStore:
    store = InMemoryRentalStore()

    for user in (adult, minor, just_eighteen, almost_eighteen):
        store.add_user(user)

    for movie in (regular_movie, second_regular_movie, adults_movie, rented_movie, rented_adults_movie):
        store.add_movie(movie)

    # Open rental of another renter holding the rented movies
    store.add_user(make_user(9, date(1980, 1, 1)))
    store.add_rental(
        Rental(
            id=500,
            start_date=date(2024, 4, 29),
            end_date=date(2024, 5, 2),
            user_id=9,
            closed=False,
            movies=[rented_movie, rented_adults_movie],
        )
    )
    return store


@pytest.fixture
def rental_service(store) -> RentalService:
    return RentalService(
        user_repository=InMemoryUserRepository(store),
        movie_repository=InMemoryMovieRepository(store),
        rental_repository=InMemoryRentalRepository(store),
        clock=lambda: TODAY,
    )
