# 📄 File: app/modules/rental_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every web request its own rental desk, connected either to the database or to the
# in-memory store depending on how the app is configured.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies wiring repositories (SQLAlchemy session-scoped or
# in-memory), the RentalService and the CQRS handlers for each request.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.infrastructure.database.session,
# rental_management infrastructure and application layers
# 🔄 Connected Modules / Calls From:
# app.modules.rental_management.presentation.api.v1.rentals, API tests (dependency_overrides)

"""
Rental Management Module Dependencies

The repository backend is picked per request:
- ``app.state.memory_store`` set: in-memory repositories over that store
- otherwise: SQLAlchemy repositories sharing one transactional session,
  committed when the request succeeds and rolled back on any error
"""

import logging
from typing import AsyncGenerator, NamedTuple

from fastapi import Depends, Request

from app.modules.rental_management.application.handlers.command_handlers import CreateRentalCommandHandler
from app.modules.rental_management.application.handlers.query_handlers import (
    GetRentalQueryHandler,
    ListRentalsQueryHandler,
)
from app.modules.rental_management.domain.repositories.movie_repository import MovieRepository
from app.modules.rental_management.domain.repositories.rental_repository import RentalRepository
from app.modules.rental_management.domain.repositories.user_repository import UserRepository
from app.modules.rental_management.domain.services.rental_service import RentalService
from app.modules.rental_management.infrastructure.database.movie_repository_impl import MovieRepositoryImpl
from app.modules.rental_management.infrastructure.database.rental_repository_impl import RentalRepositoryImpl
from app.modules.rental_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.modules.rental_management.infrastructure.memory.repositories import (
    InMemoryMovieRepository,
    InMemoryRentalRepository,
    InMemoryUserRepository,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.infrastructure.database.session import database_session

logger = logging.getLogger(__name__)


class RepositoryBundle(NamedTuple):
    """Repositories sharing one backend for the duration of a request."""

    users: UserRepository
    movies: MovieRepository
    rentals: RentalRepository


# =========================================================================
# REPOSITORY DEPENDENCIES
# =========================================================================

async def get_repository_bundle(request: Request) -> AsyncGenerator[RepositoryBundle, None]:
    """
    Yield the repositories for the current request.

    Yields:
        RepositoryBundle: user, movie and rental repositories
    """
    store = getattr(request.app.state, "memory_store", None)

    if store is not None:
        yield RepositoryBundle(
            users=InMemoryUserRepository(store),
            movies=InMemoryMovieRepository(store),
            rentals=InMemoryRentalRepository(store),
        )
        return

    async with database_session() as session:
        yield RepositoryBundle(
            users=UserRepositoryImpl(session),
            movies=MovieRepositoryImpl(session),
            rentals=RentalRepositoryImpl(session),
        )


# =========================================================================
# SERVICE & HANDLER DEPENDENCIES
# =========================================================================

def get_rental_service(
    repositories: RepositoryBundle = Depends(get_repository_bundle),
    settings: Settings = Depends(get_settings),
) -> RentalService:
    """Build the RentalService for the current request."""
    return RentalService(
        user_repository=repositories.users,
        movie_repository=repositories.movies,
        rental_repository=repositories.rentals,
        collaborator_timeout=settings.COLLABORATOR_TIMEOUT_SECONDS,
    )


def get_create_rental_handler(
    rental_service: RentalService = Depends(get_rental_service),
) -> CreateRentalCommandHandler:
    return CreateRentalCommandHandler(rental_service)


def get_rental_query_handler(
    rental_service: RentalService = Depends(get_rental_service),
) -> GetRentalQueryHandler:
    return GetRentalQueryHandler(rental_service)


def get_list_rentals_handler(
    rental_service: RentalService = Depends(get_rental_service),
) -> ListRentalsQueryHandler:
    return ListRentalsQueryHandler(rental_service)
