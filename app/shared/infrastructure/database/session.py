# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session and that a rejected rental never leaves half-written data behind.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with transaction handling and
# session lifecycle management across all database operations.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/config/database.py (engine and session factory)
#
# 🔄 Connected Modules / Calls From:
# - app.main (startup/shutdown)
# - app.modules.rental_management.presentation.dependencies (per-request sessions)
# - app.api.v1.health (readiness probe)

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import exc, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.config.database import DatabaseConfig, db_config
from app.shared.core.exceptions import DatabaseError, MovieRentalException, TransactionError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, config: DatabaseConfig = db_config):
        self._config = config
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the session factory with database engine."""
        try:
            self._session_factory = self._config.create_async_session_factory()
            self._initialized = True
            logger.info("Database session factory initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}", operation="initialize") from e

    async def close(self) -> None:
        """Dispose of the engine and forget the session factory."""
        await self._config.close_async_engine()
        self._session_factory = None
        self._initialized = False
        logger.info("Database session factory closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Domain errors raised inside the block roll the transaction back and
        propagate unchanged; unexpected errors are wrapped.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If the session cannot be created or SQL fails
            TransactionError: If an unexpected error aborts the transaction
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="get_session")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

            await session.commit()
            logger.debug("Database transaction committed successfully")

        except MovieRentalException:
            await session.rollback()
            logger.debug("Transaction rolled back after domain error")
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error occurred, transaction rolled back: {e}")
            raise TransactionError(f"Transaction failed: {e}") from e

        finally:
            await session.close()
            logger.debug("Database session closed")

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized


# Global session manager instance
session_manager = DatabaseSessionManager()


async def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize()


async def close_sessions() -> None:
    """Dispose of the global database engine."""
    await session_manager.close()


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database session management.

    Example:
        async with database_session() as db:
            rentals = await RentalRepositoryImpl(db).get_rentals()

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session


async def session_health_check() -> Dict[str, Any]:
    """
    Perform session health check by creating and closing a session.

    Returns:
        Dict containing session health information
    """
    try:
        async with session_manager.get_session() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()

        return {
            "status": "healthy",
            "initialized": session_manager.is_initialized(),
            "message": "Session factory working correctly"
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "initialized": session_manager.is_initialized(),
            "error": str(e),
            "message": "Session factory error"
        }
