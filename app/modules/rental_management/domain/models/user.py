# 📄 File: app/modules/rental_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines who a renter is - their name, contact details and birth date - and works out
# how old they are so we know whether they may rent adults-only movies.
# 🧪 Purpose (Technical Summary):
# Read-only User domain model for the rental pipeline with derived age computation
# (whole years, truncated) against an injectable reference date.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# user_repository.py, eligibility_service.py, rental_service.py, infrastructure repositories

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class User(BaseModel):
    """
    User domain model representing a movie renter.

    Users are created and maintained outside the rental pipeline; the
    pipeline only reads them:
    - id (int): Unique identifier
    - first_name / last_name (String): Renter's name
    - email (String): Contact email (validated format)
    - national_id (String): National identification number (CPF)
    - birth_date (Date): Used to derive the renter's age
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    national_id: str = Field(..., min_length=1, max_length=20)
    birth_date: date

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Store emails lowercase for consistency"""
        return v.lower().strip()

    def age(self, on: Optional[date] = None) -> int:
        """
        Whole years between birth date and ``on`` (defaults to today).

        The year is only counted once the birthday has been reached.
        """
        today = on or date.today()
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return years

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"User(id={self.id}, name={self.full_name})"
