# cruise_booking/schemas.py
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON is camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class CabinType(str, Enum):
    interior = "interior"
    oceanview = "oceanview"
    balcony = "balcony"
    suite = "suite"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


# Users

class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class UserLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class User(CamelModel):
    id: int
    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    is_admin: bool = False
    profile_picture: Optional[str] = None
    created_at: datetime


class UserPublic(CamelModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    is_admin: bool
    profile_picture: Optional[str] = None
    created_at: datetime


class AuthResponse(CamelModel):
    user: UserPublic
    access_token: str
    token_type: str = "bearer"


# Cruises

class CruiseCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str
    departure_location: str
    destination_location: str
    duration: int = Field(..., ge=1)
    base_price: float = Field(..., ge=0)
    taxes_fees: float = Field(..., ge=0)
    gratuities: float = Field(..., ge=0)
    image: str
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    is_active: bool = True
    departure_options: List[str] = []


class Cruise(CruiseCreate):
    id: int
    created_at: datetime


# Bookings

class BookingCreate(CamelModel):
    cruise_id: int
    cabin_type: CabinType
    adults: int = Field(..., ge=1, le=6)
    children: int = Field(..., ge=0, le=4)
    departure_date: datetime


class Booking(CamelModel):
    id: int
    user_id: int
    cruise_id: int
    cabin_type: CabinType
    adults: int
    children: int
    departure_date: datetime
    total_price: float = Field(..., ge=0)
    status: BookingStatus = BookingStatus.pending.value
    created_at: datetime
    updated_at: datetime


class StatusUpdate(CamelModel):
    # any JSON value; the lifecycle manager rejects anything outside BookingStatus
    status: Optional[Any] = None


class PriceBreakdown(CamelModel):
    base_price: float
    cabin_upgrade: float
    taxes_fees: float
    gratuities: float


class PriceQuote(CamelModel):
    total_price: float
    breakdown: PriceBreakdown


class Message(BaseModel):
    message: str
