# cruise_booking/models.py
from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from cruise_booking.database import Base

# sqlite_autoincrement keeps ids monotonic on SQLite even after deletes

class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
    profile_picture = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

class Cruise(Base):
    __tablename__ = "cruises"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    departure_location = Column(String, nullable=False)
    destination_location = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)
    base_price = Column(Float, nullable=False)
    taxes_fees = Column(Float, nullable=False)
    gratuities = Column(Float, nullable=False)
    image = Column(String, nullable=False)
    rating = Column(Float, default=0)
    review_count = Column(Integer, default=0)
    is_active = Column(Boolean, default=True, nullable=False)
    departure_options = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)

class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # not a foreign key: deleting a cruise leaves its bookings in place
    cruise_id = Column(Integer, index=True, nullable=False)
    cabin_type = Column(String, nullable=False)
    adults = Column(Integer, nullable=False)
    children = Column(Integer, default=0, nullable=False)
    departure_date = Column(DateTime(timezone=True), nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
