from cruise_booking.seed import SAMPLE_PASSWORD, seed_sample_data
from cruise_booking.services.accounts import AccountService


def test_seed_populates_empty_store(store):
    assert seed_sample_data(store) is True

    assert [c.name for c in store.cruises.list()] == [
        "Caribbean Paradise",
        "Mediterranean Explorer",
        "Alaskan Adventure",
    ]
    admin = AccountService(store).authenticate("admin", SAMPLE_PASSWORD)
    assert admin is not None and admin.is_admin
    customer = AccountService(store).authenticate("customer", SAMPLE_PASSWORD)
    assert customer is not None and not customer.is_admin


def test_seed_leaves_existing_data_alone(store, cruise):
    assert seed_sample_data(store) is False
    assert len(store.cruises.list()) == 1
    assert store.users.list() == []
