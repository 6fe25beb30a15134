# 📄 File: app/modules/rental_management/domain/repositories/rental_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how rentals are listed, looked up and saved, without saying which database stores them.
# 🧪 Purpose (Technical Summary):
# Repository interface for Rental entities: lookups by id and by user, listing, and creation
# from a fully validated RentalCreationPayload.
# 🔗 Dependencies:
# Domain Rental models, typing, abc
# 🔄 Connected Modules / Calls From:
# pending_rental_guard.py, rental_service.py, infrastructure implementations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.rental import Rental, RentalCreationPayload


class RentalRepository(ABC):
    """
    Repository interface for Rental entity data access operations.

    Implementation Notes:
    - Methods return domain entities (Rental), not database models
    - ``create`` attaches every payload movie to the new rental
    - ``create`` must refuse to attach a movie that is already attached,
      and refuse a second open rental for the same user, even when two
      requests race past the service-level checks
    """

    @abstractmethod
    async def get_rentals(self) -> List[Rental]:
        """
        List all rentals.

        Returns:
            List of Rental entities ordered by ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, rental_id: int) -> Optional[Rental]:
        """
        Get rental by ID.

        Args:
            rental_id: Rental ID to find

        Returns:
            Rental entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Rental]:
        """
        Get every rental (open or closed) owned by a user.

        Args:
            user_id: Owner of the rentals

        Returns:
            List of Rental entities, empty when the user has none
        """
        pass

    @abstractmethod
    async def create(self, payload: RentalCreationPayload) -> Rental:
        """
        Persist a new open rental and attach its movies.

        Args:
            payload: Validated rental data

        Returns:
            Created Rental entity with generated ID

        Raises:
            MovieInRentalError: If a movie got attached concurrently
            PendentRentalError: If the user got an open rental concurrently
            RepositoryError: If the storage operation fails
        """
        pass
