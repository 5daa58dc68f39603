# cruise_booking/routes/bookings.py
from typing import List

from fastapi import APIRouter, Depends, status

from cruise_booking import auth, schemas
from cruise_booking.dependencies import get_lifecycle, get_store
from cruise_booking.services.lifecycle import BookingLifecycle
from cruise_booking.services.pricing import quote_booking
from cruise_booking.store import EntityStore

router = APIRouter(
    prefix="/api",
    tags=["Bookings"]
)

# Public - Price Quote (nothing is stored)
@router.post("/calculate-price", response_model=schemas.PriceQuote)
def calculate_price(booking: schemas.BookingCreate, store: EntityStore = Depends(get_store)):
    return quote_booking(store, booking)

# Customer - Create a Booking
@router.post("/bookings", response_model=schemas.Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking: schemas.BookingCreate,
    lifecycle: BookingLifecycle = Depends(get_lifecycle),
    current_user: schemas.User = Depends(auth.get_current_user),
):
    return lifecycle.create_booking(current_user.id, booking)

# Customer - Own Bookings
@router.get("/bookings", response_model=List[schemas.Booking])
def list_user_bookings(
    lifecycle: BookingLifecycle = Depends(get_lifecycle),
    current_user: schemas.User = Depends(auth.get_current_user),
):
    return lifecycle.list_for_user(current_user.id)

# Admin - List All Bookings
@router.get("/admin/bookings", response_model=List[schemas.Booking], dependencies=[Depends(auth.verify_admin_user)])
def list_all_bookings(lifecycle: BookingLifecycle = Depends(get_lifecycle)):
    return lifecycle.list_all()

# Admin - Change Booking Status
@router.patch("/bookings/{booking_id}/status", response_model=schemas.Booking, dependencies=[Depends(auth.verify_admin_user)])
def update_booking_status(
    booking_id: int,
    payload: schemas.StatusUpdate,
    lifecycle: BookingLifecycle = Depends(get_lifecycle),
):
    return lifecycle.update_status(booking_id, payload.status)
