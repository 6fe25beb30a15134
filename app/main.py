# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up our Movie Rental app, connects all the different parts together,
# and makes sure everything is ready to handle rental requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware, exception handlers,
# router registration and database session lifecycle for the modular monolith.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database.session
# - app.api (middleware, v1 router, health router)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - API tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.middleware.error_handling import (
    ErrorHandlingMiddleware,
    handle_rental_exception,
    handle_validation_error,
)
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.modules.rental_management.infrastructure.memory.repositories import InMemoryRentalStore
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import MovieRentalException
from app.shared.infrastructure.database.session import close_sessions, initialize_sessions
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database session factory on startup when the database
    backend is active and disposes of the engine on shutdown.
    """
    setup_logging()
    logger.info(f"🎬 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    uses_database = getattr(app.state, "memory_store", None) is None

    if uses_database:
        await initialize_sessions()
        logger.info("✅ Session manager initialized")
    else:
        logger.info("✅ Using in-memory rental store")

    logger.info(f"✅ {settings.APP_NAME} startup complete")

    try:
        yield  # Application is running

    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")

        if uses_database:
            await close_sessions()
            logger.info("✅ Database connections closed")

        logger.info(f"✅ {settings.APP_NAME} shutdown complete")


def create_application(
    app_settings: Optional[Settings] = None,
    memory_store: Optional[InMemoryRentalStore] = None
) -> FastAPI:
    """
    Application factory function.

    Args:
        app_settings: Settings to build the app with, defaults to get_settings()
        memory_store: Store for the in-memory backend; one is created when
            REPOSITORY_BACKEND is "memory" and none is given

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        openapi_url="/openapi.json" if app_settings.DEBUG else None,
        lifespan=lifespan,
        debug=app_settings.DEBUG,
    )

    if memory_store is None and app_settings.uses_memory_backend:
        memory_store = InMemoryRentalStore()
    app.state.memory_store = memory_store

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=app_settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # Error handling middleware (added last so it wraps everything)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)

    app.include_router(
        api_v1_router,
        prefix="/api/v1",
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(MovieRentalException)
    async def movie_rental_exception_handler(
        request: Request,
        exc: MovieRentalException
    ) -> JSONResponse:
        """Handle custom Movie Rental application exceptions."""
        return handle_rental_exception(exc, request_id=getattr(request.state, "request_id", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        return handle_validation_error(exc, request_id=getattr(request.state, "request_id", None))

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "description": app_settings.APP_DESCRIPTION,
            "docs_url": "/docs" if app_settings.DEBUG else None,
            "health_check": "/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    This function is used when running the application directly
    with python -m app.main or as a script entry point.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
