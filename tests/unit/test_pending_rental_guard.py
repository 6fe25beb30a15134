"""
Tests for the pending-rental guard.
"""

from unittest.mock import AsyncMock

import pytest

from app.modules.rental_management.domain.models.rental import Rental
from app.modules.rental_management.domain.repositories.rental_repository import RentalRepository
from app.modules.rental_management.domain.services.pending_rental_guard import PendingRentalGuard
from app.shared.core.exceptions import PendentRentalError
from tests.conftest import TODAY


def make_rental(rental_id: int, closed: bool) -> Rental:
    return Rental(id=rental_id, start_date=TODAY, end_date=TODAY, user_id=1, closed=closed)


@pytest.fixture
def rental_repository() -> AsyncMock:
    return AsyncMock(spec=RentalRepository)


@pytest.mark.asyncio
async def test_no_rentals_passes(rental_repository):
    rental_repository.get_by_user_id.return_value = []

    await PendingRentalGuard(rental_repository).ensure_no_open_rental(1)

    rental_repository.get_by_user_id.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_only_closed_rentals_pass(rental_repository):
    rental_repository.get_by_user_id.return_value = [make_rental(1, True), make_rental(2, True)]

    await PendingRentalGuard(rental_repository).ensure_no_open_rental(1)


@pytest.mark.asyncio
async def test_open_rental_rejected(rental_repository):
    rental_repository.get_by_user_id.return_value = [make_rental(1, True), make_rental(2, False)]

    with pytest.raises(PendentRentalError) as exc_info:
        await PendingRentalGuard(rental_repository).ensure_no_open_rental(1)

    assert exc_info.value.message == "The user already have a rental!"
    assert exc_info.value.details == {"user_id": 1, "rental_id": 2}
