"""
Tests for the rental management domain models.

Covers age derivation around birthdays, movie availability and the
rental creation payload rules.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from app.modules.rental_management.domain.models.user import User
from app.modules.rental_management.domain.models.rental import (
    RENTAL_LIMITATIONS,
    Rental,
    RentalCreationPayload,
)
from tests.conftest import TODAY, make_user


class TestUserAge:

    def test_age_counts_whole_years(self, adult):
        assert adult.age(TODAY) == 25

    def test_birthday_today_counts(self, just_eighteen):
        assert just_eighteen.age(TODAY) == 18

    def test_birthday_tomorrow_does_not_count_yet(self, almost_eighteen):
        assert almost_eighteen.age(TODAY) == 17

    def test_leap_day_birthday(self):
        user = make_user(7, date(2004, 2, 29))
        assert user.age(date(2022, 2, 28)) == 17
        assert user.age(date(2022, 3, 1)) == 18

    def test_email_is_normalized(self):
        user = User(
            id=8,
            first_name="A",
            last_name="B",
            email="Someone@Example.COM",
            national_id="123",
            birth_date=date(1990, 1, 1),
        )
        assert user.email == "someone@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            User(
                id=8,
                first_name="A",
                last_name="B",
                email="not-an-email",
                national_id="123",
                birth_date=date(1990, 1, 1),
            )


class TestMovie:

    def test_available_without_rental(self, regular_movie):
        assert regular_movie.is_available

    def test_unavailable_when_attached(self, rented_movie):
        assert not rented_movie.is_available


class TestRental:

    def test_movie_ids_follow_movie_order(self, regular_movie, adults_movie):
        rental = Rental(
            id=1,
            start_date=TODAY,
            end_date=TODAY,
            user_id=1,
            movies=[adults_movie, regular_movie],
        )
        assert rental.movie_ids == [adults_movie.id, regular_movie.id]
        assert rental.is_open


class TestRentalCreationPayload:

    def test_duplicates_are_kept(self, regular_movie):
        payload = RentalCreationPayload(
            user_id=1,
            movies=[regular_movie, regular_movie],
            start_date=TODAY,
            end_date=TODAY,
        )
        assert payload.movie_ids == [regular_movie.id, regular_movie.id]
        assert payload.closed is False

    def test_end_before_start_rejected(self, regular_movie):
        with pytest.raises(ValidationError):
            RentalCreationPayload(
                user_id=1,
                movies=[regular_movie],
                start_date=TODAY,
                end_date=date(2024, 4, 30),
            )

    def test_closed_payload_rejected(self, regular_movie):
        with pytest.raises(ValidationError):
            RentalCreationPayload(
                user_id=1,
                movies=[regular_movie],
                start_date=TODAY,
                end_date=TODAY,
                closed=True,
            )

    def test_requires_a_movie(self):
        with pytest.raises(ValidationError):
            RentalCreationPayload(user_id=1, movies=[], start_date=TODAY, end_date=TODAY)


def test_rental_limitations():
    assert RENTAL_LIMITATIONS.MIN == 1
    assert RENTAL_LIMITATIONS.MAX == 4
    assert RENTAL_LIMITATIONS.ADULTS_REQUIRED_AGE == 18
    assert RENTAL_LIMITATIONS.RENTAL_DAYS_OPEN == 3
