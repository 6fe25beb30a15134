# 📄 File: app/modules/rental_management/infrastructure/database/rental_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes rentals in the database. When a rental is saved, it hands the movies to it
# only if nobody grabbed them in the meantime.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the RentalRepository interface. Creation inserts the rental,
# then attaches movies with a conditional UPDATE (rental_id IS NULL) and compares the affected
# row count; the partial unique index on open rentals turns a concurrent second open rental
# into PendentRentalError.
#
# 🔗 Dependencies:
# - app.modules.rental_management.domain.repositories.rental_repository (interface)
# - app.modules.rental_management.infrastructure.database.models (RentalModel, MovieModel)
# - SQLAlchemy async session, selectinload
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.dependencies (per-request wiring)

"""
Rental Repository Implementation

The session is committed or rolled back by the session manager
(app.shared.infrastructure.database.session); this repository only
flushes, so a rejected attachment leaves nothing behind.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.modules.rental_management.domain.models.rental import Rental, RentalCreationPayload
from app.modules.rental_management.domain.repositories.rental_repository import RentalRepository
from app.modules.rental_management.infrastructure.database.models import (
    OPEN_RENTAL_INDEX,
    MovieModel,
    RentalModel,
)
from app.modules.rental_management.infrastructure.database.movie_repository_impl import MovieRepositoryImpl
from app.shared.core.exceptions import MovieInRentalError, PendentRentalError, RepositoryError

logger = logging.getLogger(__name__)


class RentalRepositoryImpl(RentalRepository):
    """
    SQLAlchemy implementation of the RentalRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_rentals(self) -> List[Rental]:
        try:
            stmt = (
                select(RentalModel)
                .options(selectinload(RentalModel.movies))
                .order_by(RentalModel.id)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing rentals: {str(e)}")
            raise RepositoryError(f"Failed to list rentals: {str(e)}", operation="get_rentals", entity="rental") from e

    async def get_by_id(self, rental_id: int) -> Optional[Rental]:
        try:
            rental_model = await self._load(rental_id)

            if rental_model:
                logger.debug(f"Retrieved rental: {rental_id}")
                return self._model_to_domain(rental_model)

            logger.debug(f"Rental not found: {rental_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving rental {rental_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve rental: {str(e)}", operation="get_by_id", entity="rental") from e

    async def get_by_user_id(self, user_id: int) -> List[Rental]:
        try:
            stmt = (
                select(RentalModel)
                .options(selectinload(RentalModel.movies))
                .where(RentalModel.user_id == user_id)
                .order_by(RentalModel.id)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving rentals of user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve rentals: {str(e)}",
                operation="get_by_user_id",
                entity="rental"
            ) from e

    async def create(self, payload: RentalCreationPayload) -> Rental:
        """
        Insert the rental and attach its movies in the current transaction.

        Raises:
            PendentRentalError: Another open rental for the user was committed first
            MovieInRentalError: At least one movie was attached by someone else first
            RepositoryError: For other database errors
        """
        rental_model = RentalModel(
            user_id=payload.user_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            closed=False,
        )

        try:
            self._session.add(rental_model)
            await self._session.flush()

        except IntegrityError as e:
            await self._session.rollback()
            if OPEN_RENTAL_INDEX in str(e.orig):
                logger.warning(f"Concurrent open rental detected for user {payload.user_id}")
                raise PendentRentalError(user_id=payload.user_id) from e
            logger.error(f"Integrity error during rental creation: {str(e)}")
            raise RepositoryError(f"Failed to create rental: {str(e)}", operation="create", entity="rental") from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during rental creation: {str(e)}")
            raise RepositoryError(f"Failed to create rental: {str(e)}", operation="create", entity="rental") from e

        movie_ids = list(dict.fromkeys(payload.movie_ids))

        try:
            stmt = (
                update(MovieModel)
                .where(MovieModel.id.in_(movie_ids), MovieModel.rental_id.is_(None))
                .values(rental_id=rental_model.id)
                .execution_options(synchronize_session=False)
            )
            result = await self._session.execute(stmt)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error attaching movies to rental {rental_model.id}: {str(e)}")
            raise RepositoryError(f"Failed to attach movies: {str(e)}", operation="create", entity="movie") from e

        if result.rowcount != len(movie_ids):
            await self._session.rollback()
            logger.warning(
                f"Movie attachment lost a race for user {payload.user_id}: "
                f"{result.rowcount} of {len(movie_ids)} movies were still available"
            )
            raise MovieInRentalError()

        created = await self._load(rental_model.id, refresh=True)
        logger.info(f"Created rental {rental_model.id} for user {payload.user_id} with movies {movie_ids}")
        return self._model_to_domain(created)

    async def _load(self, rental_id: int, refresh: bool = False) -> Optional[RentalModel]:
        stmt = (
            select(RentalModel)
            .options(selectinload(RentalModel.movies))
            .where(RentalModel.id == rental_id)
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _model_to_domain(rental_model: RentalModel) -> Rental:
        """
        Convert a RentalModel (with movies loaded) to a domain Rental entity.
        """
        return Rental(
            id=rental_model.id,
            start_date=rental_model.start_date,
            end_date=rental_model.end_date,
            user_id=rental_model.user_id,
            closed=bool(rental_model.closed),
            movies=[MovieRepositoryImpl._model_to_domain(movie) for movie in rental_model.movies],
        )
