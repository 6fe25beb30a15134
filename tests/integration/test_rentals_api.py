"""
API tests for the rentals endpoints, running against the in-memory backend.

Scenarios:
1. Successful rental creation
2. Rejections mapped to HTTP status codes
3. Request-shape validation
4. Rental queries
5. Request ID propagation, health endpoints and collaborator timeouts
"""

from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import create_application
from app.modules.rental_management.domain.models.movie import Movie
from app.modules.rental_management.domain.models.rental import Rental
from app.modules.rental_management.infrastructure.memory.repositories import InMemoryRentalStore
from app.modules.rental_management.presentation.dependencies import get_rental_service
from app.shared.core.exceptions import CollaboratorTimeoutError
from tests.conftest import make_user

RENTALS_URL = "/api/v1/rentals"

ADULT_ID = 1
MINOR_ID = 2
BUSY_USER_ID = 3

FREE_MOVIE_ID = 10
OTHER_FREE_MOVIE_ID = 11
ADULTS_MOVIE_ID = 20
RENTED_MOVIE_ID = 30

OPEN_RENTAL_ID = 100


@pytest.fixture
def api_store() -> InMemoryRentalStore:
    today = date.today()
    store = InMemoryRentalStore()

    store.add_user(make_user(ADULT_ID, date(today.year - 30, 1, 1)))
    store.add_user(make_user(MINOR_ID, date(today.year - 12, 1, 1)))
    store.add_user(make_user(BUSY_USER_ID, date(today.year - 40, 1, 1)))

    store.add_movie(Movie(id=FREE_MOVIE_ID, name="Family Picnic"))
    store.add_movie(Movie(id=OTHER_FREE_MOVIE_ID, name="Space Dogs"))
    store.add_movie(Movie(id=ADULTS_MOVIE_ID, name="Midnight Heist", adults_only=True))
    store.add_movie(Movie(id=RENTED_MOVIE_ID, name="Borrowed Time"))

    store.add_rental(
        Rental(
            id=OPEN_RENTAL_ID,
            start_date=today,
            end_date=today + timedelta(days=3),
            user_id=BUSY_USER_ID,
            movies=[store.movies[RENTED_MOVIE_ID]],
        )
    )
    return store


@pytest.fixture
def app(api_store):
    return create_application(memory_store=api_store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def error_code(response) -> str:
    return response.json()["error"]["code"]


# =============================================================================
# 1. Successful creation
# =============================================================================

def test_create_rental(client, api_store):
    response = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [FREE_MOVIE_ID, ADULTS_MOVIE_ID]})

    assert response.status_code == 201
    body = response.json()
    assert body["user_id"] == ADULT_ID
    assert body["closed"] is False
    assert body["movie_ids"] == [FREE_MOVIE_ID, ADULTS_MOVIE_ID]
    assert body["start_date"] == date.today().isoformat()
    assert body["end_date"] == (date.today() + timedelta(days=3)).isoformat()
    assert api_store.movies[FREE_MOVIE_ID].rental_id == body["id"]


def test_create_rental_with_explicit_period(client):
    response = client.post(
        RENTALS_URL,
        json={
            "user_id": ADULT_ID,
            "movie_ids": [FREE_MOVIE_ID],
            "start_date": "2030-01-10",
            "end_date": "2030-01-12",
        },
    )

    assert response.status_code == 201
    assert response.json()["start_date"] == "2030-01-10"
    assert response.json()["end_date"] == "2030-01-12"


# =============================================================================
# 2. Rejections
# =============================================================================

def test_minor_cannot_rent_adults_movie(client, api_store):
    response = client.post(RENTALS_URL, json={"user_id": MINOR_ID, "movie_ids": [FREE_MOVIE_ID, ADULTS_MOVIE_ID]})

    assert response.status_code == 403
    assert error_code(response) == "INSUFFICIENT_AGE"
    assert response.json()["error"]["message"] == "Cannot see that movie."
    assert api_store.movies[FREE_MOVIE_ID].rental_id is None


def test_rented_movie_is_rejected(client):
    response = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [RENTED_MOVIE_ID]})

    assert response.status_code == 409
    assert error_code(response) == "MOVIE_IN_RENTAL"
    assert response.json()["error"]["message"] == "Movie already in a rental."


def test_user_with_open_rental_is_rejected(client):
    response = client.post(RENTALS_URL, json={"user_id": BUSY_USER_ID, "movie_ids": [FREE_MOVIE_ID]})

    assert response.status_code == 409
    assert error_code(response) == "PENDENT_RENTAL"
    assert response.json()["error"]["message"] == "The user already have a rental!"


def test_second_rental_for_same_user_is_rejected(client):
    first = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [FREE_MOVIE_ID]})
    second = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [OTHER_FREE_MOVIE_ID]})

    assert first.status_code == 201
    assert second.status_code == 409
    assert error_code(second) == "PENDENT_RENTAL"


@pytest.mark.parametrize(
    "payload",
    [
        {"user_id": 999, "movie_ids": [FREE_MOVIE_ID]},
        {"user_id": ADULT_ID, "movie_ids": [999]},
    ],
)
def test_unknown_user_or_movie(client, payload):
    response = client.post(RENTALS_URL, json=payload)

    assert response.status_code == 404
    assert error_code(response) == "NOT_FOUND"


# =============================================================================
# 3. Request-shape validation
# =============================================================================

@pytest.mark.parametrize("movie_ids", [[], [1, 2, 3, 4, 5]])
def test_movie_count_outside_limits(client, movie_ids):
    response = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": movie_ids})

    assert response.status_code == 422
    assert error_code(response) == "VALIDATION_ERROR"


def test_end_date_before_start_date(client, api_store):
    response = client.post(
        RENTALS_URL,
        json={
            "user_id": ADULT_ID,
            "movie_ids": [FREE_MOVIE_ID],
            "start_date": "2030-01-10",
            "end_date": "2030-01-09",
        },
    )

    assert response.status_code == 422
    assert error_code(response) == "VALIDATION_ERROR"
    assert list(api_store.rentals) == [OPEN_RENTAL_ID]


# =============================================================================
# 4. Queries
# =============================================================================

def test_list_rentals(client):
    client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [FREE_MOVIE_ID]})

    response = client.get(RENTALS_URL)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [rental["user_id"] for rental in body["rentals"]] == [BUSY_USER_ID, ADULT_ID]


def test_get_rental(client):
    response = client.get(f"{RENTALS_URL}/{OPEN_RENTAL_ID}")

    assert response.status_code == 200
    assert response.json()["movie_ids"] == [RENTED_MOVIE_ID]


def test_get_unknown_rental(client):
    response = client.get(f"{RENTALS_URL}/4242")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Rental not found"


# =============================================================================
# 5. Cross-cutting behaviour
# =============================================================================

def test_request_id_is_echoed(client):
    response = client.get(RENTALS_URL, headers={"X-Request-ID": "trace-42"})

    assert response.headers["X-Request-ID"] == "trace-42"
    assert "X-Response-Time" in response.headers


def test_error_body_carries_request_id(client):
    response = client.get(f"{RENTALS_URL}/4242", headers={"X-Request-ID": "trace-43"})

    assert response.json()["error"]["request_id"] == "trace-43"
    assert response.headers["X-Error-Code"] == "NOT_FOUND"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_reports_memory_store(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    storage = response.json()["storage"]
    assert storage["backend"] == "memory"
    assert storage["movies"] == 4
    assert storage["rentals"] == 1


def test_collaborator_timeout_maps_to_504(app, client):
    service = MagicMock()
    service.create_rental = AsyncMock(
        side_effect=CollaboratorTimeoutError(collaborator="user_repository.get_by_id", timeout_seconds=0.5)
    )
    app.dependency_overrides[get_rental_service] = lambda: service

    response = client.post(RENTALS_URL, json={"user_id": ADULT_ID, "movie_ids": [FREE_MOVIE_ID]})

    assert response.status_code == 504
    assert error_code(response) == "COLLABORATOR_TIMEOUT"
