# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error
# messages, and tags every request with an ID so its log lines can be followed from start to end.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware providing request correlation (X-Request-ID, log context),
# request timing and a catch-all 500 response, plus the helpers used by the application
# exception handlers to render the shared error body.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, app.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From:
# app.main (middleware and exception handler registration)

import logging
import traceback
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import MovieRentalException, is_server_error
from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the Movie Rental API

    Every request gets a correlation ID (taken from the X-Request-ID
    header when the client sends one) that is stamped on all log
    records emitted while the request runs. Exceptions that escape the
    application exception handlers become a 500 JSON error response.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any exceptions that occur

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = datetime.now()

        with log_context(request_id=request_id):
            logger.info(f"{request.method} {request.url.path} started")

            try:
                response = await call_next(request)

            except Exception as exc:
                return self._handle_exception(request, exc, request_id, start_time)

            processing_time = (datetime.now() - start_time).total_seconds()
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{processing_time:.3f}s"

            logger.info(
                f"{request.method} {request.url.path} completed "
                f"with {response.status_code} in {processing_time:.3f}s"
            )
            return response

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
        request_id: str,
        start_time: datetime
    ) -> JSONResponse:
        """
        Handle exception and create appropriate error response

        Args:
            request: HTTP request
            exc: Exception that occurred
            request_id: Request correlation ID
            start_time: Request start time

        Returns:
            JSON error response
        """
        if isinstance(exc, MovieRentalException):
            error = exc.to_dict()["error"]
            status_code, code, message, details = error["status_code"], error["code"], error["message"], error["details"]
        else:
            status_code, code, message, details = 500, "INTERNAL_SERVER_ERROR", "An internal server error occurred", {}

        if is_server_error(exc):
            logger.error(
                f"Server error in {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
                exc_info=True
            )
        else:
            logger.info(f"Client error in {request.method} {request.url.path}: {code}")

        if self.settings.DEBUG and not self.settings.is_production:
            details = {
                **details,
                "debug": {
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc().split('\n')
                }
            }

        response = create_error_response(
            error_code=code,
            message=message,
            status_code=status_code,
            details=details,
            request_id=request_id
        )

        processing_time = (datetime.now() - start_time).total_seconds()
        response.headers["X-Response-Time"] = f"{processing_time:.3f}s"

        return response


# Utility functions for error handling
def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID

    Returns:
        JSON error response
    """
    error_response = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now().isoformat(),
            "request_id": request_id
        }
    }

    response = JSONResponse(
        status_code=status_code,
        content=error_response
    )

    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id

    response.headers["X-Error-Code"] = error_code

    return response


def handle_rental_exception(exc: MovieRentalException, request_id: Optional[str] = None) -> JSONResponse:
    """
    Render a MovieRentalException with its own status code

    Args:
        exc: Application exception
        request_id: Request correlation ID

    Returns:
        JSON error response
    """
    error = exc.to_dict()["error"]

    if is_server_error(exc):
        logger.error(f"Server error {error['code']}: {error['message']}")

    return create_error_response(
        error_code=error["code"],
        message=error["message"],
        status_code=error["status_code"],
        details=error["details"],
        request_id=request_id
    )


def handle_validation_error(exc, request_id: Optional[str] = None) -> JSONResponse:
    """
    Handle Pydantic validation errors

    Args:
        exc: Pydantic validation exception
        request_id: Request correlation ID

    Returns:
        JSON error response
    """
    error_details = {}

    if hasattr(exc, 'errors') and callable(exc.errors):
        validation_errors = []
        for error in exc.errors():
            validation_errors.append({
                "field": ".".join(str(loc) for loc in error.get("loc", [])),
                "message": error.get("msg", "Validation error"),
                "type": error.get("type", "validation_error"),
            })
        error_details["validation_errors"] = validation_errors

    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details=error_details,
        request_id=request_id
    )
