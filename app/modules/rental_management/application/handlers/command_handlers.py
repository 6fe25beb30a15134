# 📄 File: app/modules/rental_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out a "create rental" request by handing it to the rental desk and reporting the result.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handler delegating rental creation to the RentalService domain service.
#
# 🔗 Dependencies:
# - app.modules.rental_management.application.commands (command definitions)
# - app.modules.rental_management.domain.services (RentalService)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.rental_management.presentation.api.v1.rentals (create endpoint)
# - app.modules.rental_management.presentation.dependencies (handler wiring)

__all__ = [
    "CreateRentalCommandHandler",
]

import logging

from app.modules.rental_management.application.commands.create_rental import CreateRentalCommand
from app.modules.rental_management.domain.models.rental import Rental
from app.modules.rental_management.domain.services.rental_service import RentalService

logger = logging.getLogger(__name__)


class CreateRentalCommandHandler:
    """
    Handles the rental creation command.
    """

    def __init__(self, rental_service: RentalService):
        self._rental_service = rental_service

    async def handle(self, command: CreateRentalCommand) -> Rental:
        """
        Handles the rental creation command.

        Domain errors raised by the service propagate unchanged.
        """
        logger.info(f"Handling CreateRentalCommand for user {command.user_id}")
        rental = await self._rental_service.create_rental(**command.to_service_kwargs())
        logger.info(f"Rental {rental.id} created for user {command.user_id}")
        return rental
