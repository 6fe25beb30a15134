# 📄 File: app/modules/rental_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers questions about rentals - the whole list, or one rental by its number.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for rental read operations, delegating to the RentalService.
#
# 🔗 Dependencies:
# - app.modules.rental_management.application.queries (query definitions)
# - app.modules.rental_management.domain.services (RentalService)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.api.v1.rentals (read endpoints)

import logging
from typing import List

from app.modules.rental_management.application.queries.get_rental import GetRentalQuery, ListRentalsQuery
from app.modules.rental_management.domain.models.rental import Rental
from app.modules.rental_management.domain.services.rental_service import RentalService

logger = logging.getLogger(__name__)


class GetRentalQueryHandler:
    """Handler for single-rental lookup."""

    def __init__(self, rental_service: RentalService):
        self._rental_service = rental_service

    async def handle(self, query: GetRentalQuery) -> Rental:
        """
        Raises:
            NotFoundError: No rental with the requested ID
        """
        logger.debug(f"Fetching rental {query.rental_id}")
        return await self._rental_service.get_rental_by_id(query.rental_id)


class ListRentalsQueryHandler:
    """Handler for listing rentals."""

    def __init__(self, rental_service: RentalService):
        self._rental_service = rental_service

    async def handle(self, query: ListRentalsQuery) -> List[Rental]:
        rentals = await self._rental_service.get_rentals()
        logger.debug(f"Listed {len(rentals)} rentals")
        return rentals
