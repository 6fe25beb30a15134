# 📄 File: app/modules/rental_management/infrastructure/database/movie_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Looks movies up in the database, including who has them right now.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the MovieRepository interface with model-to-domain mapping.
#
# 🔗 Dependencies:
# - app.modules.rental_management.domain.repositories.movie_repository (interface)
# - app.modules.rental_management.infrastructure.database.models (MovieModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.dependencies (per-request wiring)
# - rental_repository_impl.py (movie mapping)

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.rental_management.domain.models.movie import Movie
from app.modules.rental_management.domain.repositories.movie_repository import MovieRepository
from app.modules.rental_management.infrastructure.database.models import MovieModel
from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class MovieRepositoryImpl(MovieRepository):
    """
    SQLAlchemy implementation of the MovieRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        try:
            stmt = select(MovieModel).where(MovieModel.id == movie_id)
            result = await self._session.execute(stmt)
            movie_model = result.scalar_one_or_none()

            if movie_model:
                logger.debug(f"Retrieved movie: {movie_id}")
                return self._model_to_domain(movie_model)

            logger.debug(f"Movie not found: {movie_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving movie {movie_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve movie: {str(e)}",
                operation="get_by_id",
                entity="movie"
            ) from e

    @staticmethod
    def _model_to_domain(movie_model: MovieModel) -> Movie:
        """
        Convert a MovieModel to a domain Movie entity.
        """
        return Movie(
            id=movie_model.id,
            name=movie_model.name,
            adults_only=movie_model.adults_only,
            rental_id=movie_model.rental_id,
        )
