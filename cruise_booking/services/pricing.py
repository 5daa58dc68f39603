# cruise_booking/services/pricing.py
"""
Booking price calculation.

Amounts are plain floats and nothing is rounded here; rounding for display
is left to the client.
"""
from cruise_booking import errors
from cruise_booking.schemas import BookingCreate, CabinType, Cruise, PriceBreakdown, PriceQuote
from cruise_booking.store import EntityStore

CABIN_MULTIPLIERS = {
    CabinType.interior: 1.0,
    CabinType.oceanview: 1.3,
    CabinType.balcony: 1.6,
    CabinType.suite: 2.2,
}

CHILD_FARE_RATE = 0.75
CHILD_GRATUITY_RATE = 0.5


def cabin_multiplier(cabin_type) -> float:
    return CABIN_MULTIPLIERS[CabinType(cabin_type)]


def calculate_price(cruise: Cruise, request: BookingCreate) -> PriceQuote:
    adults = request.adults
    children = request.children

    base_price = cruise.base_price * adults + cruise.base_price * CHILD_FARE_RATE * children

    cabin_price = base_price * cabin_multiplier(request.cabin_type)
    cabin_upgrade = cabin_price - base_price

    taxes_fees = cruise.taxes_fees * (adults + children)
    gratuities = cruise.gratuities * (adults + children * CHILD_GRATUITY_RATE)

    return PriceQuote(
        total_price=cabin_price + taxes_fees + gratuities,
        breakdown=PriceBreakdown(
            base_price=base_price,
            cabin_upgrade=cabin_upgrade,
            taxes_fees=taxes_fees,
            gratuities=gratuities,
        ),
    )


def quote_booking(store: EntityStore, request: BookingCreate) -> PriceQuote:
    """Look the cruise up and price the request against it."""
    cruise = store.cruises.get(request.cruise_id)
    if cruise is None:
        raise errors.NotFound("Cruise not found")
    return calculate_price(cruise, request)
