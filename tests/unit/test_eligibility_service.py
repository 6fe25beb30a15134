"""
Tests for the eligibility validator (age gate then availability gate).
"""

import pytest

from app.modules.rental_management.domain.services.eligibility_service import EligibilityValidator
from app.shared.core.exceptions import InsufficientAgeError, MovieInRentalError
from tests.conftest import TODAY


@pytest.fixture
def validator() -> EligibilityValidator:
    return EligibilityValidator(clock=lambda: TODAY)


def test_adult_may_rent_adults_only_movie(validator, adult, adults_movie):
    assert validator.validate(adult, adults_movie) is None


def test_minor_rejected_for_adults_only_movie(validator, minor, adults_movie):
    with pytest.raises(InsufficientAgeError) as exc_info:
        validator.validate(minor, adults_movie)

    assert exc_info.value.message == "Cannot see that movie."
    assert exc_info.value.details == {"user_id": minor.id, "movie_id": adults_movie.id}


def test_minor_may_rent_regular_movie(validator, minor, regular_movie):
    validator.validate(minor, regular_movie)


def test_exactly_eighteen_passes(validator, just_eighteen, adults_movie):
    validator.validate(just_eighteen, adults_movie)


def test_one_day_before_eighteen_fails(validator, almost_eighteen, adults_movie):
    with pytest.raises(InsufficientAgeError):
        validator.validate(almost_eighteen, adults_movie)


def test_explicit_reference_date_overrides_clock(validator, almost_eighteen, adults_movie):
    from datetime import date

    validator.validate(almost_eighteen, adults_movie, today=date(2024, 5, 2))


def test_rented_movie_rejected(validator, adult, rented_movie):
    with pytest.raises(MovieInRentalError) as exc_info:
        validator.validate(adult, rented_movie)

    assert exc_info.value.message == "Movie already in a rental."
    assert exc_info.value.details["rental_id"] == 500


def test_age_gate_runs_before_availability(validator, minor, rented_adults_movie):
    with pytest.raises(InsufficientAgeError):
        validator.validate(minor, rented_adults_movie)


def test_adult_with_rented_adults_movie_hits_availability(validator, adult, rented_adults_movie):
    with pytest.raises(MovieInRentalError):
        validator.validate(adult, rented_adults_movie)


def test_validation_has_no_side_effects(validator, adult, regular_movie):
    before = regular_movie.model_dump()
    validator.validate(adult, regular_movie)
    assert regular_movie.model_dump() == before
