# 📄 File: app/modules/rental_management/presentation/api/v1/rentals.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for renting movies and looking rentals up.
#
# 🧪 Purpose (Technical Summary):
# FastAPI rental endpoints turning requests into CQRS commands/queries, delegating to the
# handlers and converting domain rentals into response schemas. Domain errors propagate to
# the application exception handlers, which map them to HTTP status codes.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - app.modules.rental_management.application (commands, queries, handlers)
# - app.modules.rental_management.presentation.api.schemas.rental_schemas
# - app.modules.rental_management.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /rentals)

"""
Rentals API Endpoints

Endpoints:
- POST /: Create a rental (201)
- GET /: List rentals
- GET /{rental_id}: Get one rental

Rejections:
- 404 user, movie or rental not found
- 403 adults-only movie requested by a minor
- 409 movie already in a rental, or the user already holds an open rental
- 422 malformed request (movie count outside limits, end_date before start_date)
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from pydantic import ValidationError as PydanticValidationError

from app.modules.rental_management.application.commands.create_rental import CreateRentalCommand
from app.modules.rental_management.application.handlers.command_handlers import CreateRentalCommandHandler
from app.modules.rental_management.application.handlers.query_handlers import (
    GetRentalQueryHandler,
    ListRentalsQueryHandler,
)
from app.modules.rental_management.application.queries.get_rental import GetRentalQuery, ListRentalsQuery
from app.modules.rental_management.presentation.api.schemas.rental_schemas import (
    CreateRentalRequest,
    RentalListResponse,
    RentalResponse,
)
from app.modules.rental_management.presentation.dependencies import (
    get_create_rental_handler,
    get_list_rentals_handler,
    get_rental_query_handler,
)
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

rentals_router = APIRouter()

ERROR_RESPONSES = {
    403: {"description": "Adults-only movie requested by an underage user"},
    404: {"description": "User or movie not found"},
    409: {"description": "Movie already rented, or the user has a pending rental"},
    422: {"description": "Invalid request"},
}


@rentals_router.post(
    "",
    response_model=RentalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a rental",
    description="Rent between 1 and 4 movies for a user",
    responses=ERROR_RESPONSES,
)
async def create_rental(
    request: CreateRentalRequest,
    handler: CreateRentalCommandHandler = Depends(get_create_rental_handler),
) -> RentalResponse:
    """
    Create a rental.

    The user is resolved first, then every movie in the given order
    (age gate, then availability gate), then the pending-rental check.
    The first failing rule rejects the whole request.
    """
    try:
        command = CreateRentalCommand(**request.model_dump())
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid rental request",
            details={"validation_errors": [error["msg"] for error in e.errors()]}
        ) from e

    rental = await handler.handle(command)
    return RentalResponse.from_domain(rental)


@rentals_router.get(
    "",
    response_model=RentalListResponse,
    summary="List rentals",
)
async def list_rentals(
    handler: ListRentalsQueryHandler = Depends(get_list_rentals_handler),
) -> RentalListResponse:
    rentals = await handler.handle(ListRentalsQuery())
    return RentalListResponse(
        rentals=[RentalResponse.from_domain(rental) for rental in rentals],
        total=len(rentals),
    )


@rentals_router.get(
    "/{rental_id}",
    response_model=RentalResponse,
    summary="Get a rental",
    responses={404: {"description": "Rental not found"}},
)
async def get_rental(
    rental_id: int = Path(..., gt=0),
    handler: GetRentalQueryHandler = Depends(get_rental_query_handler),
) -> RentalResponse:
    rental = await handler.handle(GetRentalQuery(rental_id=rental_id))
    return RentalResponse.from_domain(rental)
