# 📄 File: app/modules/rental_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how renters, movies and rentals are stored in the database, and
# the database-level rules that stop a movie or a renter from being double-booked.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the rental schema: users, rentals and movies, with the
# movie -> rental attachment foreign key and a partial unique index allowing one open
# rental per user.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (DatabaseBase with naming convention)
#
# 🔄 Connected Modules / Calls From:
# - *_repository_impl.py (queries and mapping)
# - migrations/env.py (target metadata)

"""
SQLAlchemy Models for Rental Management

Models:
- UserModel: Renters (read by the rental pipeline)
- RentalModel: Rentals with their period and open/closed flag
- MovieModel: Catalogue entries; ``rental_id`` is NULL while available
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    text,
)
from sqlalchemy.orm import relationship

from app.shared.config.database import DatabaseBase

OPEN_RENTAL_INDEX = "uq_rentals_user_id_open"


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for renters.
    """
    __tablename__ = "users"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier for each user"
    )
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User's email address"
    )
    national_id = Column(
        String(20),
        unique=True,
        nullable=False,
        comment="National identification number (CPF)"
    )
    birth_date = Column(Date, nullable=False)

    rentals = relationship("RentalModel", back_populates="user")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"


# =============================================================================
# RENTAL MODEL
# =============================================================================

class RentalModel(DatabaseBase):
    """
    SQLAlchemy model for rentals.

    At most one row per user may have ``closed = false``; the partial
    unique index enforces it even when two requests race.
    """
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    start_date = Column(Date, nullable=False, comment="First day of the rental")
    end_date = Column(Date, nullable=False, comment="Last day of the rental")
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    closed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        comment="Whether the movies were returned"
    )

    user = relationship("UserModel", back_populates="rentals")
    movies = relationship("MovieModel", back_populates="rental", order_by="MovieModel.id")

    __table_args__ = (
        Index(
            OPEN_RENTAL_INDEX,
            "user_id",
            unique=True,
            postgresql_where=text("closed = false")
        ),
        CheckConstraint("end_date >= start_date", name="period"),
    )

    def __repr__(self) -> str:
        return f"<RentalModel(id={self.id}, user_id={self.user_id}, closed={self.closed})>"


# =============================================================================
# MOVIE MODEL
# =============================================================================

class MovieModel(DatabaseBase):
    """
    SQLAlchemy model for catalogue movies.
    """
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    adults_only = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false")
    )
    rental_id = Column(
        Integer,
        ForeignKey("rentals.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Rental currently holding the movie, NULL when available"
    )

    rental = relationship("RentalModel", back_populates="movies")

    def __repr__(self) -> str:
        return f"<MovieModel(id={self.id}, name={self.name}, rental_id={self.rental_id})>"
