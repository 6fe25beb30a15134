# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to our Movie Rental database, managing connections efficiently,
# and ensuring the app can serve many rental requests at the same time.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async database configuration with connection pooling, session factory
# creation, the declarative base for all ORM models, and environment-specific settings
# for PostgreSQL.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine and session
# - app.shared.config.settings
# - PostgreSQL driver (asyncpg)
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.session
# - app.modules.rental_management.infrastructure.database.models
# - migrations/env.py

from typing import Any, Dict, Optional

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from .settings import Settings, get_settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._async_engine: Optional[AsyncEngine] = None
        self._async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self.settings.database_url

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on environment."""
        settings = self.settings

        base_config: Dict[str, Any] = {
            "echo": settings.DEBUG and settings.is_development,
            "connect_args": {
                "server_settings": {
                    "application_name": f"{settings.APP_NAME}_{settings.ENVIRONMENT}",
                    "jit": "off",  # Disable JIT for better connection times
                }
            },
        }

        if settings.is_testing:
            # Use NullPool for testing to avoid connection issues
            base_config["poolclass"] = NullPool
        else:
            base_config.update({
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_pre_ping": True,  # Verify connections before use
            })

            if settings.is_production:
                base_config["connect_args"].update({
                    "command_timeout": 30,
                    "server_settings": {
                        **base_config["connect_args"]["server_settings"],
                        "timezone": "UTC",
                        "statement_timeout": "300000",  # 5 minutes
                        "idle_in_transaction_session_timeout": "300000",
                    }
                })

        return base_config

    def create_async_engine(self) -> AsyncEngine:
        """Create and configure async database engine."""
        if self._async_engine is None:
            self._async_engine = create_async_engine(
                self.database_url,
                **self.engine_kwargs
            )
        return self._async_engine

    def create_async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Create async session factory."""
        if self._async_session_factory is None:
            engine = self.create_async_engine()
            self._async_session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,  # Manual flush control for better performance
            )
        return self._async_session_factory

    async def close_async_engine(self) -> None:
        """Close the async database engine."""
        if self._async_engine:
            await self._async_engine.dispose()
            self._async_engine = None
            self._async_session_factory = None


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides common metadata configuration for all database models
    in the Movie Rental application.
    """
    metadata = metadata


# =============================================================================
# GLOBAL DATABASE CONFIGURATION INSTANCE
# =============================================================================

db_config = DatabaseConfig()
