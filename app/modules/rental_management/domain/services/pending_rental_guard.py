# 📄 File: app/modules/rental_management/domain/services/pending_rental_guard.py
# 🧭 Purpose (Layman Explanation):
# Makes sure a renter returns what they have before taking anything new.
# 🧪 Purpose (Technical Summary):
# Enforces the single-open-rental-per-user invariant by inspecting the user's rentals
# through the RentalRepository.
# 🔗 Dependencies:
# RentalRepository, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# rental_service.py (once per creation attempt), unit tests

import logging

from app.shared.core.exceptions import PendentRentalError

from ..repositories.rental_repository import RentalRepository

logger = logging.getLogger(__name__)


class PendingRentalGuard:
    """Rejects a user who still holds an open rental."""

    def __init__(self, rental_repository: RentalRepository):
        self._rental_repository = rental_repository

    async def ensure_no_open_rental(self, user_id: int) -> None:
        """
        Raise when any rental of ``user_id`` is still open.

        The requested movies play no part in this check.

        Raises:
            PendentRentalError: The user already has an open rental
        """
        rentals = await self._rental_repository.get_by_user_id(user_id)

        for rental in rentals:
            if rental.is_open:
                logger.info(f"User {user_id} still holds open rental {rental.id}")
                raise PendentRentalError(user_id=user_id, rental_id=rental.id)
