# 📄 File: app/modules/rental_management/domain/models/movie.py
# 🧭 Purpose (Layman Explanation):
# Describes a movie in the catalogue: its name, whether it is for adults only,
# and which rental (if any) currently has it.
# 🧪 Purpose (Technical Summary):
# Movie domain model; `rental_id` is the attachment signal read by the availability gate
# (None means available).
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# movie_repository.py, rental.py, eligibility_service.py, infrastructure repositories

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Movie available for rental."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(..., min_length=1, max_length=255)
    adults_only: bool = False
    rental_id: Optional[int] = None

    @property
    def is_available(self) -> bool:
        """A movie is available while it is not attached to a rental"""
        return self.rental_id is None
