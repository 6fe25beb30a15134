# 📄 File: app/modules/rental_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Looks renters up in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the UserRepository interface with model-to-domain mapping.
#
# 🔗 Dependencies:
# - app.modules.rental_management.domain.repositories.user_repository (interface)
# - app.modules.rental_management.infrastructure.database.models (UserModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.dependencies (per-request wiring)

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.rental_management.domain.models.user import User
from app.modules.rental_management.domain.repositories.user_repository import UserRepository
from app.modules.rental_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            stmt = select(UserModel).where(UserModel.id == user_id)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

            if user_model:
                logger.debug(f"Retrieved user: {user_id}")
                return self._model_to_domain(user_model)

            logger.debug(f"User not found: {user_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user: {str(e)}",
                operation="get_by_id",
                entity="user"
            ) from e

    @staticmethod
    def _model_to_domain(user_model: UserModel) -> User:
        """
        Convert a UserModel to a domain User entity.
        """
        return User(
            id=user_model.id,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            email=user_model.email,
            national_id=user_model.national_id,
            birth_date=user_model.birth_date,
        )
