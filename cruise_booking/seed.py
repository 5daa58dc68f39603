# cruise_booking/seed.py
"""Demo accounts and cruises loaded into an empty store at startup."""
import logging

from cruise_booking import security
from cruise_booking.schemas import CruiseCreate
from cruise_booking.services.accounts import AccountService
from cruise_booking.services.catalog import CruiseCatalog
from cruise_booking.store import EntityStore

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = [
    {
        "username": "admin",
        "email": "admin@cruises.com",
        "first_name": "Admin",
        "last_name": "User",
        "phone_number": "123-456-7890",
        "is_admin": True,
        "profile_picture": "",
    },
    {
        "username": "customer",
        "email": "customer@example.com",
        "first_name": "John",
        "last_name": "Doe",
        "phone_number": "555-123-4567",
        "is_admin": False,
        "profile_picture": "",
    },
]

SAMPLE_CRUISES = [
    CruiseCreate(
        name="Caribbean Paradise",
        description="Enjoy crystal clear waters, white sand beaches, and luxurious accommodations on this unforgettable Caribbean adventure.",
        departure_location="Miami",
        destination_location="Bahamas",
        duration=7,
        base_price=1299,
        taxes_fees=199,
        gratuities=101,
        image="https://images.unsplash.com/photo-1580541631971-c7f8c0f8e414",
        rating=4.5,
        review_count=128,
        is_active=True,
        departure_options=["2025-06-15", "2025-07-05", "2025-07-25", "2025-08-15"],
    ),
    CruiseCreate(
        name="Mediterranean Explorer",
        description="Discover the rich history, culture, and cuisine of the Mediterranean with stops in Spain, France, and Italy.",
        departure_location="Barcelona",
        destination_location="Rome",
        duration=10,
        base_price=2199,
        taxes_fees=299,
        gratuities=150,
        image="https://images.unsplash.com/photo-1534447677768-be436bb09401",
        rating=5,
        review_count=97,
        is_active=True,
        departure_options=["2025-05-22", "2025-06-12", "2025-07-02", "2025-08-22"],
    ),
    CruiseCreate(
        name="Alaskan Adventure",
        description="Experience the majestic glaciers, wildlife, and breathtaking landscapes of Alaska on this unforgettable journey.",
        departure_location="Seattle",
        destination_location="Juneau",
        duration=12,
        base_price=1899,
        taxes_fees=249,
        gratuities=144,
        image="https://images.unsplash.com/photo-1579656450812-5b1da79e7cc3",
        rating=4.8,
        review_count=86,
        is_active=True,
        departure_options=["2025-05-10", "2025-06-05", "2025-07-15", "2025-08-10"],
    ),
]


def seed_sample_data(store: EntityStore) -> bool:
    """Populate an empty store. Returns False when there was already data."""
    if store.users.list() or store.cruises.list():
        return False

    accounts = AccountService(store)
    password_hash = security.get_password_hash(SAMPLE_PASSWORD)
    for user in SAMPLE_USERS:
        accounts.create_user(password=password_hash, **user)

    catalog = CruiseCatalog(store)
    for cruise in SAMPLE_CRUISES:
        catalog.create(cruise)

    logger.info("Seeded %d users and %d cruises", len(SAMPLE_USERS), len(SAMPLE_CRUISES))
    return True
