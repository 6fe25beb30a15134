"""
Tests for CreateRentalCommand request-shape validation.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from app.modules.rental_management.application.commands.create_rental import CreateRentalCommand
from app.modules.rental_management.domain.models.rental import RENTAL_LIMITATIONS


def test_missing_dates_are_left_to_the_service():
    command = CreateRentalCommand(user_id=1, movie_ids=[10])

    assert command.start_date is None
    assert command.end_date is None
    assert command.to_service_kwargs()["start_date"] is None


def test_single_date_is_not_completed():
    command = CreateRentalCommand(user_id=1, movie_ids=[10], start_date=date(2024, 2, 27))

    assert command.start_date == date(2024, 2, 27)
    assert command.end_date is None


def test_same_day_rental_is_accepted():
    command = CreateRentalCommand(
        user_id=1, movie_ids=[10], start_date=date(2024, 5, 1), end_date=date(2024, 5, 1)
    )

    assert command.start_date == command.end_date


def test_end_before_start_is_rejected():
    with pytest.raises(ValidationError, match="end_date must not be before start_date"):
        CreateRentalCommand(
            user_id=1, movie_ids=[10], start_date=date(2024, 5, 2), end_date=date(2024, 5, 1)
        )


@pytest.mark.parametrize("count", [RENTAL_LIMITATIONS.MIN, RENTAL_LIMITATIONS.MAX])
def test_movie_count_limits_accepted(count):
    command = CreateRentalCommand(user_id=1, movie_ids=list(range(1, count + 1)))

    assert len(command.movie_ids) == count


@pytest.mark.parametrize("count", [RENTAL_LIMITATIONS.MIN - 1, RENTAL_LIMITATIONS.MAX + 1])
def test_movie_count_outside_limits_rejected(count):
    with pytest.raises(ValidationError):
        CreateRentalCommand(user_id=1, movie_ids=list(range(1, count + 1)))


def test_duplicates_and_order_are_kept():
    command = CreateRentalCommand(user_id=1, movie_ids=[7, 3, 7])

    assert command.movie_ids == [7, 3, 7]


def test_non_positive_user_id_rejected():
    with pytest.raises(ValidationError):
        CreateRentalCommand(user_id=0, movie_ids=[10])


def test_to_service_kwargs():
    command = CreateRentalCommand(
        user_id=5, movie_ids=[1, 2], start_date=date(2024, 5, 1), end_date=date(2024, 5, 4)
    )

    assert command.to_service_kwargs() == {
        "user_id": 5,
        "movie_ids": [1, 2],
        "start_date": date(2024, 5, 1),
        "end_date": date(2024, 5, 4),
    }
