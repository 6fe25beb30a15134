# 📄 File: app/modules/rental_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we find a renter by their number without saying which database keeps them.
# 🧪 Purpose (Technical Summary):
# Repository interface for read-only User lookup used by the rental pipeline.
# 🔗 Dependencies:
# Domain User model, typing, abc
# 🔄 Connected Modules / Calls From:
# rental_service.py, infrastructure implementations

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User lookup.

    Users are maintained elsewhere; the rental pipeline only reads them.
    Implementations return domain entities, never database models.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find

        Returns:
            User entity if found, None otherwise
        """
        pass
