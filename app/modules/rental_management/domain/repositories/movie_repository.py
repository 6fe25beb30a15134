# 📄 File: app/modules/rental_management/domain/repositories/movie_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we look up a movie from the catalogue, including whether someone has it right now.
# 🧪 Purpose (Technical Summary):
# Repository interface for Movie lookup; the returned Movie carries its current rental attachment.
# 🔗 Dependencies:
# Domain Movie model, typing, abc
# 🔄 Connected Modules / Calls From:
# rental_service.py, infrastructure implementations

from abc import ABC, abstractmethod
from typing import Optional

from ..models.movie import Movie


class MovieRepository(ABC):
    """Repository interface for Movie lookup."""

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """
        Get movie by ID.

        Args:
            movie_id: Movie ID to find

        Returns:
            Movie entity (with its current ``rental_id``) if found, None otherwise
        """
        pass
