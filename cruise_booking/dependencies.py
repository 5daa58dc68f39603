# cruise_booking/dependencies.py
from fastapi import Depends, Request

from cruise_booking.config import settings
from cruise_booking.services.accounts import AccountService
from cruise_booking.services.catalog import CruiseCatalog
from cruise_booking.services.lifecycle import BookingLifecycle
from cruise_booking.store import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_catalog(store: EntityStore = Depends(get_store)) -> CruiseCatalog:
    return CruiseCatalog(store)


def get_lifecycle(store: EntityStore = Depends(get_store)) -> BookingLifecycle:
    return BookingLifecycle(store, strict_transitions=settings.STRICT_STATUS_TRANSITIONS)


def get_accounts(store: EntityStore = Depends(get_store)) -> AccountService:
    return AccountService(store)
