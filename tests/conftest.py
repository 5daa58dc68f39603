import os

# must be set before cruise_booking.config is imported
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from cruise_booking import security
from cruise_booking.main import create_app
from cruise_booking.schemas import CruiseCreate
from cruise_booking.services.accounts import AccountService
from cruise_booking.services.catalog import CruiseCatalog
from cruise_booking.store import MemoryStore


def cruise_payload(**overrides):
    payload = {
        "name": "Test Voyage",
        "description": "A week at sea",
        "departureLocation": "Miami",
        "destinationLocation": "Nassau",
        "duration": 7,
        "basePrice": 1000,
        "taxesFees": 200,
        "gratuities": 100,
        "image": "https://example.com/ship.jpg",
        "rating": 4.5,
        "reviewCount": 10,
        "isActive": True,
        "departureOptions": ["2025-06-15", "2025-07-05"],
    }
    payload.update(overrides)
    return payload


def booking_payload(cruise_id, **overrides):
    payload = {
        "cruiseId": cruise_id,
        "cabinType": "balcony",
        "adults": 2,
        "children": 1,
        "departureDate": "2025-06-15",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def cruise(store):
    return CruiseCatalog(store).create(CruiseCreate.model_validate(cruise_payload()))


def _make_user(store, username, is_admin):
    return AccountService(store).create_user(
        username=username,
        email=f"{username}@example.com",
        password=security.get_password_hash("password123"),
        first_name=username.title(),
        last_name="Tester",
        is_admin=is_admin,
    )


@pytest.fixture
def customer(store):
    return _make_user(store, "customer", is_admin=False)


@pytest.fixture
def admin(store):
    return _make_user(store, "admin", is_admin=True)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


def bearer(user):
    return {"Authorization": f"Bearer {security.token_for_user(user)}"}


@pytest.fixture
def customer_headers(customer):
    return bearer(customer)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)
