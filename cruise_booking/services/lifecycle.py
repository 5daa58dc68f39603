# cruise_booking/services/lifecycle.py
"""
Booking lifecycle: creation and status changes.

Every booking starts out ``pending``. Admins move it to ``confirmed`` or
``cancelled``. By default any of the three statuses may be set from any
state; with ``strict_transitions`` only the forward moves below are allowed.
"""
import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Union

import pydantic

from cruise_booking import errors
from cruise_booking.schemas import Booking, BookingCreate, BookingStatus
from cruise_booking.services.pricing import calculate_price
from cruise_booking.store import EntityStore

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    BookingStatus.pending: {BookingStatus.pending, BookingStatus.confirmed, BookingStatus.cancelled},
    BookingStatus.confirmed: {BookingStatus.confirmed, BookingStatus.cancelled},
    BookingStatus.cancelled: {BookingStatus.cancelled},
}


def parse_status(value) -> BookingStatus:
    try:
        return BookingStatus(value)
    except (TypeError, ValueError):
        raise errors.ValidationError("Invalid status value")


class BookingLifecycle:
    def __init__(self, store: EntityStore, strict_transitions: bool = False):
        self.store = store
        self.strict_transitions = strict_transitions

    def create_booking(self, user_id: int, request: Union[BookingCreate, Mapping]) -> Booking:
        if not isinstance(request, BookingCreate):
            try:
                request = BookingCreate.model_validate(request)
            except pydantic.ValidationError as exc:
                raise errors.from_schema_error(exc, "Invalid booking data")

        cruise = self.store.cruises.get(request.cruise_id)
        if cruise is None:
            raise errors.NotFound("Cruise not found")
        # priced before anything is written, so a failed booking leaves no record
        quote = calculate_price(cruise, request)

        departure_day = request.departure_date.date().isoformat()
        if departure_day not in cruise.departure_options:
            logger.warning(
                "Booking for cruise %s uses departure date %s outside its offered options",
                request.cruise_id, departure_day,
            )

        now = datetime.now(timezone.utc)
        booking = self.store.bookings.add({
            **request.model_dump(),
            "user_id": user_id,
            "total_price": quote.total_price,
            "status": BookingStatus.pending.value,
            "created_at": now,
            "updated_at": now,
        })
        logger.info("Booking %s created for user %s (total %.2f)", booking.id, user_id, booking.total_price)
        return booking

    def update_status(self, booking_id: int, new_status) -> Booking:
        status = parse_status(new_status)

        booking = self.store.bookings.get(booking_id)
        if booking is None:
            raise errors.NotFound("Booking not found")

        current = BookingStatus(booking.status)
        if self.strict_transitions and status not in ALLOWED_TRANSITIONS[current]:
            raise errors.ValidationError(f"Cannot change booking status from {current.value} to {status.value}")

        booking.status = status.value
        booking.updated_at = datetime.now(timezone.utc)
        updated = self.store.bookings.replace(booking)
        if updated is None:
            raise errors.NotFound("Booking not found")
        logger.info("Booking %s status %s -> %s", booking_id, current.value, status.value)
        return updated

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.store.bookings.get(booking_id)

    def list_for_user(self, user_id: int) -> List[Booking]:
        return self.store.bookings.find(user_id=user_id)

    def list_all(self) -> List[Booking]:
        return self.store.bookings.list()
